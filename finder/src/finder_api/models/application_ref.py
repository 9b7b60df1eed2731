# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, Field, StrictStr

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class ApplicationRef(BaseModel):
    """
    Service principal resolved from a display name prefix.
    """  # noqa: E501

    object_id: StrictStr = Field(alias="objectId")
    display_name: Optional[StrictStr] = Field(default=None, alias="displayName")
    app_id: Optional[StrictStr] = Field(default=None, alias="appId")
    __properties: ClassVar[list[str]] = ["objectId", "displayName", "appId"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_graph(cls, obj: Dict[str, Any]) -> Self:
        """Create an instance of ApplicationRef from a Graph service principal"""
        return cls.model_validate(
            {
                "objectId": obj.get("id"),
                "displayName": obj.get("displayName"),
                "appId": obj.get("appId"),
            }
        )
