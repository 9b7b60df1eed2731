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


class GroupRef(BaseModel):
    """
    Group resolved from its display name.
    """  # noqa: E501

    group_id: StrictStr = Field(alias="groupId")
    display_name: StrictStr = Field(alias="displayName")
    __properties: ClassVar[list[str]] = ["groupId", "displayName"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_graph(cls, obj: Dict[str, Any]) -> Self:
        """Create an instance of GroupRef from a Graph group object"""
        return cls.model_validate(
            {
                "groupId": obj.get("id"),
                "displayName": obj.get("displayName") or "",
            }
        )
