# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from enum import Enum


class OriginSystem(str, Enum):
    """
    Origin system of a resource scope recognised by the search.
    """

    AAD_APPLICATION = "AadApplication"
    AAD_GROUP = "AadGroup"
    SHAREPOINT_ONLINE = "SharePointOnline"
