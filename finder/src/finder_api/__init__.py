"""Public exports for the finder API request models."""

from __future__ import annotations

from finder_api.models.resolve_application_request import ResolveApplicationRequest
from finder_api.models.resolve_group_request import ResolveGroupRequest
from finder_api.models.search_request import SearchRequest

__all__ = [
    "ResolveApplicationRequest",
    "ResolveGroupRequest",
    "SearchRequest",
]
