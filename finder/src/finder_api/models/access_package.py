# coding: utf-8

"""
    Access Package Resource Finder API (v1)

    Read-only snapshots of entitlement management objects returned by the directory.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field, StrictStr

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


_SNAPSHOT_CONFIG = {
    "populate_by_name": True,
    "frozen": True,
    "extra": "ignore",
    "protected_namespaces": (),
}


class ResourceScope(BaseModel):
    """
    Resource instance an access package grants a role on.
    """  # noqa: E501

    id: Optional[StrictStr] = None
    display_name: Optional[StrictStr] = Field(default=None, alias="displayName")
    origin_id: Optional[StrictStr] = Field(default=None, alias="originId")
    origin_system: Optional[StrictStr] = Field(default=None, alias="originSystem")
    __properties: ClassVar[list[str]] = ["id", "displayName", "originId", "originSystem"]

    model_config = _SNAPSHOT_CONFIG


class ResourceRole(BaseModel):
    """
    Role granted on a resource scope.
    """  # noqa: E501

    id: Optional[StrictStr] = None
    display_name: Optional[StrictStr] = Field(default=None, alias="displayName")
    origin_id: Optional[StrictStr] = Field(default=None, alias="originId")
    origin_system: Optional[StrictStr] = Field(default=None, alias="originSystem")
    __properties: ClassVar[list[str]] = ["id", "displayName", "originId", "originSystem"]

    model_config = _SNAPSHOT_CONFIG


class ResourceRoleScope(BaseModel):
    """
    Pairing of a resource scope with the role granted on it.
    """  # noqa: E501

    id: Optional[StrictStr] = None
    role: Optional[ResourceRole] = None
    scope: Optional[ResourceScope] = None
    __properties: ClassVar[list[str]] = ["id", "role", "scope"]

    model_config = _SNAPSHOT_CONFIG


class AccessPackage(BaseModel):
    """
    Access package with its (optionally expanded) resource role scopes.
    """  # noqa: E501

    id: StrictStr
    display_name: Optional[StrictStr] = Field(default=None, alias="displayName")
    resource_role_scopes: List[ResourceRoleScope] = Field(default_factory=list, alias="resourceRoleScopes")
    __properties: ClassVar[list[str]] = ["id", "displayName", "resourceRoleScopes"]

    model_config = _SNAPSHOT_CONFIG

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        """Create an instance of AccessPackage from a Graph payload"""
        if obj is None:
            return None
        if not isinstance(obj, dict):
            return cls.model_validate(obj)
        scopes = obj.get("resourceRoleScopes")
        if scopes is None:
            scopes = []
        elif isinstance(scopes, list):
            scopes = [item for item in scopes if isinstance(item, dict)]
        return cls.model_validate(
            {
                "id": obj.get("id"),
                "displayName": obj.get("displayName"),
                "resourceRoleScopes": scopes,
            }
        )
