# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field, StrictStr


class Error(BaseModel):
    """
    Error body returned by every endpoint.
    """  # noqa: E501

    error: StrictStr = Field(description="Human readable error message.")
    details: Optional[Any] = Field(
        default=None,
        description="Upstream error detail or candidate list.",
    )
    __properties: ClassVar[list[str]] = ["error", "details"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }
