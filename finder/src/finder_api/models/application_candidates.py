# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List

from pydantic import BaseModel, Field, StrictBool

from finder_api.models.application_ref import ApplicationRef


class ApplicationCandidates(BaseModel):
    """
    Several service principals matched the prefix; the caller picks one.
    """  # noqa: E501

    multiple: StrictBool = True
    applications: List[ApplicationRef] = Field(min_length=2)
    __properties: ClassVar[list[str]] = ["multiple", "applications"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
