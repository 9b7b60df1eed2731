from __future__ import annotations

import threading
import time
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from finder_api.config.settings import FinderSettings
from finder_api.service.facade import FinderServiceFacade
from finder_api.service.graph_client import GraphRequestError


def scope(origin_system: str, origin_id: str, display_name: str | None = None) -> dict[str, Any]:
    return {
        "id": f"scope-{origin_id}",
        "originSystem": origin_system,
        "originId": origin_id,
        "displayName": display_name,
    }


def role_scope(resource: dict[str, Any] | None, role_name: str | None = None) -> dict[str, Any]:
    return {
        "id": f"rrs-{resource['originId'] if resource else 'none'}",
        "role": {"displayName": role_name} if role_name is not None else None,
        "scope": resource,
    }


class FakeDirectory:
    """In-memory stand-in for the Graph client used by the services."""

    def __init__(self) -> None:
        self.packages: list[dict[str, Any]] = []
        self.details: dict[str, dict[str, Any] | Exception] = {}
        self.groups: list[dict[str, Any]] = []
        self.service_principals: list[dict[str, Any]] = []
        self.catalog_error: Exception | None = None
        self.lookup_error: Exception | None = None
        self.detail_delay: Callable[[str], float] = lambda _package_id: 0.0
        self.calls: list[tuple[str, str | None]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def add_package(self, package_id: str, name: str, scopes: list[dict[str, Any]] | None) -> None:
        self.packages.append({"id": package_id, "displayName": name})
        detail: dict[str, Any] = {"id": package_id, "displayName": name}
        if scopes is not None:
            detail["resourceRoleScopes"] = scopes
        self.details[package_id] = detail

    def list_access_packages(self) -> list[dict[str, Any]]:
        self.calls.append(("list_access_packages", None))
        if self.catalog_error is not None:
            raise self.catalog_error
        return list(self.packages)

    def get_access_package(self, package_id: str) -> dict[str, Any]:
        with self._lock:
            self.calls.append(("get_access_package", package_id))
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self.detail_delay(package_id)
            if delay:
                time.sleep(delay)
            detail = self.details.get(package_id)
            if detail is None:
                raise GraphRequestError(f"Access package {package_id} not found.")
            if isinstance(detail, Exception):
                raise detail
            return detail
        finally:
            with self._lock:
                self.in_flight -= 1

    def list_groups_by_display_name(self, display_name: str) -> list[dict[str, Any]]:
        self.calls.append(("list_groups_by_display_name", display_name))
        if self.lookup_error is not None:
            raise self.lookup_error
        return [group for group in self.groups if group.get("displayName") == display_name]

    def list_service_principals_by_prefix(self, prefix: str) -> list[dict[str, Any]]:
        self.calls.append(("list_service_principals_by_prefix", prefix))
        if self.lookup_error is not None:
            raise self.lookup_error
        return [
            principal
            for principal in self.service_principals
            if str(principal.get("displayName", "")).startswith(prefix)
        ]


class FakeClientFactory:
    def __init__(self, directory: FakeDirectory) -> None:
        self.directory = directory
        self.created = 0

    def create(self) -> FakeDirectory:
        self.created += 1
        return self.directory


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture
def client_factory(directory: FakeDirectory) -> FakeClientFactory:
    return FakeClientFactory(directory)


@pytest.fixture
def finder_settings() -> FinderSettings:
    return FinderSettings(search_max_concurrency=4, search_timeout_seconds=10, group_ambiguity="first")


@pytest.fixture
def client(monkeypatch, client_factory: FakeClientFactory, finder_settings: FinderSettings) -> TestClient:
    from finder_api.app import app

    facade = FinderServiceFacade(client_factory, finder_settings)
    monkeypatch.setattr("finder_api.impl.search_api.get_finder_service_facade", lambda: facade)
    monkeypatch.setattr("finder_api.impl.resolve_api.get_finder_service_facade", lambda: facade)
    return TestClient(app)
