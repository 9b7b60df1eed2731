"""Facade wiring the finder services to an authenticated client factory."""

from __future__ import annotations

from functools import lru_cache

from finder_api.auth.credentials import select_credential
from finder_api.config.settings import FinderSettings, get_settings
from finder_api.service.graph_client import CredentialGraphClientFactory, GraphClientFactory
from finder_api.service.matcher import AccessPackageMatcher
from finder_api.service.resolvers import ApplicationResolver, GroupResolver


class FinderServiceFacade:
    def __init__(self, client_factory: GraphClientFactory, settings: FinderSettings) -> None:
        self.client_factory = client_factory
        self.matcher = AccessPackageMatcher(
            client_factory,
            max_concurrency=settings.search_max_concurrency,
            timeout_seconds=float(settings.search_timeout_seconds),
        )
        self.groups = GroupResolver(client_factory, ambiguity=settings.group_ambiguity)
        self.applications = ApplicationResolver(client_factory)


@lru_cache()
def get_graph_client_factory() -> GraphClientFactory:
    settings = get_settings()
    return CredentialGraphClientFactory(select_credential(settings), settings)


@lru_cache()
def get_finder_service_facade() -> FinderServiceFacade:
    return FinderServiceFacade(get_graph_client_factory(), get_settings())


__all__ = ["FinderServiceFacade", "get_finder_service_facade", "get_graph_client_factory"]
