# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field, StrictStr


class PartialFailure(BaseModel):
    """
    Access package that could not be scanned during a search.
    """  # noqa: E501

    access_package_id: StrictStr = Field(alias="accessPackageId")
    details: StrictStr = Field(description="Upstream error message.")
    __properties: ClassVar[list[str]] = ["accessPackageId", "details"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }
