# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import BaseModel, Field, StrictStr


class SearchRequest(BaseModel):
    """
    Search for access packages referencing a resource.
    """  # noqa: E501

    search_type: Optional[StrictStr] = Field(
        default=None,
        description="application, group or sharepoint.",
        alias="searchType",
    )
    search_value: Optional[StrictStr] = Field(
        default=None,
        description="Origin identifier of the resource (object id or site URL).",
        alias="searchValue",
    )
    __properties: ClassVar[list[str]] = ["searchType", "searchValue"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }
