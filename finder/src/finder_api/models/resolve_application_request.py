# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import BaseModel, Field, StrictStr


class ResolveApplicationRequest(BaseModel):
    """
    ResolveApplicationRequest
    """  # noqa: E501

    application_name: Optional[StrictStr] = Field(
        default=None,
        description="Display name prefix of the service principal.",
        alias="applicationName",
    )
    __properties: ClassVar[list[str]] = ["applicationName"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }
