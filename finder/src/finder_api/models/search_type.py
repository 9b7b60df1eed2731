# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from finder_api.models.origin_system import OriginSystem


class SearchType(str, Enum):
    """
    Kind of resource a search looks for.
    """

    APPLICATION = "application"
    GROUP = "group"
    SHAREPOINT = "sharepoint"

    @property
    def origin_system(self) -> OriginSystem:
        return _ORIGIN_SYSTEMS[self]

    @classmethod
    def from_value(cls, value: object) -> Optional[SearchType]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


_ORIGIN_SYSTEMS = {
    SearchType.APPLICATION: OriginSystem.AAD_APPLICATION,
    SearchType.GROUP: OriginSystem.AAD_GROUP,
    SearchType.SHAREPOINT: OriginSystem.SHAREPOINT_ONLINE,
}
