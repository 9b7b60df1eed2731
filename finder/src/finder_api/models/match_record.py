# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict

from pydantic import BaseModel, Field, StrictStr

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class MatchRecord(BaseModel):
    """
    One access package resource role scope that matched a search.
    """  # noqa: E501

    access_package_name: StrictStr = Field(alias="accessPackageName")
    access_package_id: StrictStr = Field(alias="accessPackageId")
    resource_name: StrictStr = Field(alias="resourceName")
    resource_type: StrictStr = Field(alias="resourceType")
    resource_id: StrictStr = Field(alias="resourceId")
    role_name: StrictStr = Field(alias="roleName")
    __properties: ClassVar[list[str]] = [
        "accessPackageName",
        "accessPackageId",
        "resourceName",
        "resourceType",
        "resourceId",
        "roleName",
    ]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        return cls.model_validate(obj)
