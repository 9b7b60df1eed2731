"""Resolve human entered names into directory object identifiers."""

from __future__ import annotations

import asyncio
import logging
from typing import Literal, Union

from pydantic import ValidationError

from finder_api.models.application_candidates import ApplicationCandidates
from finder_api.models.application_ref import ApplicationRef
from finder_api.models.group_ref import GroupRef
from finder_api.service.errors import AmbiguousGroupError, DirectoryObjectNotFoundError, UpstreamError
from finder_api.service.graph_client import GraphClientError, GraphClientFactory

LOGGER = logging.getLogger(__name__)

RESOLVE_GROUP_FAILED = "Failed to resolve group"
RESOLVE_APPLICATION_FAILED = "Failed to resolve application"


class GroupResolver:
    """Exact display name lookup.

    Display names are not unique in the directory. With ``ambiguity="first"``
    the first group in the directory's response order wins and a warning is
    logged; ``ambiguity="error"`` raises :class:`AmbiguousGroupError` instead.
    """

    def __init__(
        self,
        client_factory: GraphClientFactory,
        *,
        ambiguity: Literal["first", "error"] = "first",
    ) -> None:
        self._client_factory = client_factory
        self._ambiguity = ambiguity

    async def resolve(self, display_name: str) -> GroupRef:
        LOGGER.info("Resolving group: %s", display_name)
        client = self._client_factory.create()
        try:
            groups = await asyncio.to_thread(client.list_groups_by_display_name, display_name)
        except GraphClientError as exc:
            raise UpstreamError(RESOLVE_GROUP_FAILED, str(exc)) from exc
        if not groups:
            raise DirectoryObjectNotFoundError("Group not found")

        try:
            candidates = [GroupRef.from_graph(group) for group in groups]
        except ValidationError as exc:
            raise UpstreamError(RESOLVE_GROUP_FAILED, str(exc)) from exc
        if len(candidates) > 1:
            if self._ambiguity == "error":
                raise AmbiguousGroupError(display_name, candidates)
            LOGGER.warning(
                "%d groups named %r; using %s",
                len(candidates),
                display_name,
                candidates[0].group_id,
            )
        return candidates[0]


class ApplicationResolver:
    """Display name prefix lookup over service principals."""

    def __init__(self, client_factory: GraphClientFactory) -> None:
        self._client_factory = client_factory

    async def resolve(self, name_prefix: str) -> Union[ApplicationRef, ApplicationCandidates]:
        LOGGER.info("Resolving application: %s", name_prefix)
        client = self._client_factory.create()
        try:
            principals = await asyncio.to_thread(client.list_service_principals_by_prefix, name_prefix)
        except GraphClientError as exc:
            raise UpstreamError(RESOLVE_APPLICATION_FAILED, str(exc)) from exc
        if not principals:
            raise DirectoryObjectNotFoundError("Application not found")

        try:
            applications = [ApplicationRef.from_graph(principal) for principal in principals]
        except ValidationError as exc:
            raise UpstreamError(RESOLVE_APPLICATION_FAILED, str(exc)) from exc
        if len(applications) == 1:
            return applications[0]
        return ApplicationCandidates(applications=applications)


__all__ = ["ApplicationResolver", "GroupResolver"]
