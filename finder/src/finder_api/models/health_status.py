# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, StrictStr


class HealthStatus(BaseModel):
    """
    HealthStatus
    """  # noqa: E501

    status: StrictStr
    environment: StrictStr
    __properties: ClassVar[list[str]] = ["status", "environment"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }
