# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import BaseModel, Field, StrictStr


class ResolveGroupRequest(BaseModel):
    """
    ResolveGroupRequest
    """  # noqa: E501

    group_name: Optional[StrictStr] = Field(
        default=None,
        description="Exact display name of the group.",
        alias="groupName",
    )
    __properties: ClassVar[list[str]] = ["groupName"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }
