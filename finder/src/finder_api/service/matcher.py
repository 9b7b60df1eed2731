"""Search access packages for resource role scopes that reference a resource."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from finder_api.models.access_package import AccessPackage, ResourceRoleScope
from finder_api.models.match_record import MatchRecord
from finder_api.models.partial_failure import PartialFailure
from finder_api.models.search_type import SearchType
from finder_api.service.errors import UpstreamError
from finder_api.service.graph_client import GraphClient, GraphClientError, GraphClientFactory

LOGGER = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
SEARCH_FAILED_MESSAGE = "Failed to search access packages"


@dataclass(frozen=True)
class SearchCriterion:
    search_type: str
    search_value: str


@dataclass
class SearchOutcome:
    criterion: SearchCriterion
    records: list[MatchRecord] = field(default_factory=list)
    partial_failures: list[PartialFailure] = field(default_factory=list)


def scope_matches(role_scope: ResourceRoleScope, search_type: SearchType, search_value: str) -> bool:
    """Exact, case-sensitive match on origin id within the search type's origin system."""

    scope = role_scope.scope
    if scope is None:
        return False
    return scope.origin_system == search_type.origin_system.value and scope.origin_id == search_value


def match_package(
    package: AccessPackage,
    search_type: SearchType,
    search_value: str,
    *,
    fallback_name: Optional[str] = None,
) -> list[MatchRecord]:
    records: list[MatchRecord] = []
    for role_scope in package.resource_role_scopes:
        if not scope_matches(role_scope, search_type, search_value):
            continue
        scope = role_scope.scope
        role = role_scope.role
        records.append(
            MatchRecord(
                access_package_name=package.display_name or fallback_name or NOT_AVAILABLE,
                access_package_id=package.id,
                resource_name=scope.display_name or NOT_AVAILABLE,
                resource_type=scope.origin_system,
                resource_id=scope.origin_id,
                role_name=(role.display_name if role else None) or NOT_AVAILABLE,
            )
        )
    return records


class AccessPackageMatcher:
    """Scans every access package with a bounded pool of detail fetches.

    A failed detail fetch only drops that package; it is reported back as a
    partial failure instead of failing the search.
    """

    def __init__(
        self,
        client_factory: GraphClientFactory,
        *,
        max_concurrency: int = 4,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self._client_factory = client_factory
        self._max_concurrency = max(1, int(max_concurrency))
        self._timeout_seconds = timeout_seconds

    async def search(self, criterion: SearchCriterion) -> SearchOutcome:
        LOGGER.info("Searching for %s: %s", criterion.search_type, criterion.search_value)
        search_type = SearchType.from_value(criterion.search_type)
        if search_type is None:
            LOGGER.info("Unsupported search type %r; nothing can match", criterion.search_type)
            return SearchOutcome(criterion=criterion)

        client = self._client_factory.create()
        try:
            outcome = await asyncio.wait_for(
                self._scan(client, criterion, search_type),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise UpstreamError(
                SEARCH_FAILED_MESSAGE,
                f"Search did not finish within {self._timeout_seconds} seconds.",
            ) from exc
        LOGGER.info(
            "Found %d matches (%d packages skipped)",
            len(outcome.records),
            len(outcome.partial_failures),
        )
        return outcome

    async def _scan(
        self,
        client: GraphClient,
        criterion: SearchCriterion,
        search_type: SearchType,
    ) -> SearchOutcome:
        try:
            summaries = await asyncio.to_thread(client.list_access_packages)
        except GraphClientError as exc:
            raise UpstreamError(SEARCH_FAILED_MESSAGE, str(exc)) from exc
        LOGGER.info("Found %d access packages", len(summaries))

        semaphore = asyncio.Semaphore(self._max_concurrency)
        scans = [
            self._scan_package(client, semaphore, summary, search_type, criterion.search_value)
            for summary in summaries
        ]
        outcome = SearchOutcome(criterion=criterion)
        for records, failure in await asyncio.gather(*scans):
            outcome.records.extend(records)
            if failure is not None:
                outcome.partial_failures.append(failure)
        return outcome

    async def _scan_package(
        self,
        client: GraphClient,
        semaphore: asyncio.Semaphore,
        summary: dict[str, Any],
        search_type: SearchType,
        search_value: str,
    ) -> tuple[list[MatchRecord], Optional[PartialFailure]]:
        package_id = summary.get("id")
        if not isinstance(package_id, str) or not package_id:
            LOGGER.warning("Skipping access package without an id: %r", summary)
            return [], None
        async with semaphore:
            try:
                payload = await asyncio.to_thread(client.get_access_package, package_id)
                package = AccessPackage.from_dict(payload)
            except Exception as exc:
                LOGGER.warning("Error processing access package %s: %s", package_id, exc)
                return [], PartialFailure(access_package_id=package_id, details=str(exc))
        if not package.resource_role_scopes:
            return [], None
        fallback_name = summary.get("displayName") if isinstance(summary.get("displayName"), str) else None
        return match_package(package, search_type, search_value, fallback_name=fallback_name), None


__all__ = [
    "AccessPackageMatcher",
    "NOT_AVAILABLE",
    "SearchCriterion",
    "SearchOutcome",
    "match_package",
    "scope_matches",
]
