"""HTTP client for the Microsoft Graph directory endpoints used by the finder."""

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import quote, urlencode, urljoin

import requests
from azure.core.credentials import TokenCredential
from azure.core.exceptions import AzureError
from requests import Response

from finder_api.config.settings import FinderSettings

LOGGER = logging.getLogger(__name__)

ACCESS_PACKAGES_PATH = "/identityGovernance/entitlementManagement/accessPackages"
ACCESS_PACKAGE_EXPAND = "resourceRoleScopes($expand=role,scope)"


class GraphClientError(Exception):
    """Base error for Graph client operations."""


class GraphNotFoundError(GraphClientError):
    """Raised when Graph returns 404."""


class GraphUnauthorizedError(GraphClientError):
    """Raised when Graph authentication or authorization fails."""


class GraphThrottledError(GraphClientError):
    """Raised when Graph throttles the caller (429)."""


class GraphRequestError(GraphClientError):
    """Raised for unexpected Graph failures."""


def odata_string(value: str) -> str:
    """Quote ``value`` as an OData string literal."""

    return "'" + value.replace("'", "''") + "'"


class GraphClient:
    def __init__(
        self,
        *,
        credential: TokenCredential,
        base_url: str,
        scope: str,
        timeout_seconds: float,
        max_pages: int,
    ) -> None:
        self._credential = credential
        self._base_url = base_url.rstrip("/")
        self._scope = scope
        self._timeout_seconds = timeout_seconds
        self._max_pages = max_pages

    @classmethod
    def from_settings(cls, credential: TokenCredential, settings: FinderSettings) -> GraphClient:
        return cls(
            credential=credential,
            base_url=settings.graph_base_url,
            scope=settings.graph_scope,
            timeout_seconds=float(settings.graph_timeout_seconds),
            max_pages=int(settings.max_pages),
        )

    def list_access_packages(self) -> list[dict[str, Any]]:
        return self._list(ACCESS_PACKAGES_PATH, params={"$select": "id,displayName"})

    def get_access_package(self, package_id: str) -> dict[str, Any]:
        return self._request_json(
            "GET",
            self._build_url(
                f"{ACCESS_PACKAGES_PATH}/{quote(package_id, safe='')}",
                params={"$expand": ACCESS_PACKAGE_EXPAND},
            ),
        )

    def list_groups_by_display_name(self, display_name: str) -> list[dict[str, Any]]:
        return self._list(
            "/groups",
            params={
                "$filter": f"displayName eq {odata_string(display_name)}",
                "$select": "id,displayName",
            },
        )

    def list_service_principals_by_prefix(self, prefix: str) -> list[dict[str, Any]]:
        return self._list(
            "/servicePrincipals",
            params={
                "$filter": f"startswith(displayName, {odata_string(prefix)})",
                "$select": "id,displayName,appId",
            },
        )

    def _list(self, path: str, *, params: dict[str, str]) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        url: str | None = self._build_url(path, params=params)
        pages = 0
        while url and pages < self._max_pages:
            payload = self._request_json("GET", url)
            value = payload.get("value")
            if not isinstance(value, list):
                raise GraphRequestError("Graph returned a collection without a value array.")
            items.extend(item for item in value if isinstance(item, dict))
            pages += 1
            url = payload.get("@odata.nextLink")
        if url:
            raise GraphRequestError(f"Graph collection {path} has more than {self._max_pages} pages.")
        return items

    def _request_json(self, method: str, url: str) -> dict[str, Any]:
        response = self._request(method, url)
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as exc:
            raise GraphRequestError("Graph returned invalid JSON.") from exc
        if not isinstance(payload, dict):
            raise GraphRequestError("Graph returned an unexpected payload.")
        return payload

    def _request(self, method: str, url: str) -> Response:
        try:
            response = requests.request(
                method,
                url,
                headers=self._build_headers(),
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise GraphRequestError(str(exc)) from exc
        if response.status_code >= 400:
            self._raise_for_status(response)
        return response

    def _build_headers(self) -> dict[str, str]:
        try:
            token = self._credential.get_token(self._scope)
        except AzureError as exc:
            raise GraphUnauthorizedError(f"Unable to acquire a Graph token: {exc}") from exc
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {token.token}",
        }

    def _build_url(self, path: str, *, params: dict[str, str] | None = None) -> str:
        url = urljoin(f"{self._base_url}/", path.lstrip("/"))
        if params:
            query = urlencode(params, safe="$,()'", quote_via=quote)
            if query:
                return f"{url}?{query}"
        return url

    @staticmethod
    def _error_message(response: Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return None

    @classmethod
    def _raise_for_status(cls, response: Response) -> None:
        message = cls._error_message(response)
        if response.status_code == 404:
            raise GraphNotFoundError(message or "Graph resource not found.")
        if response.status_code in {401, 403}:
            raise GraphUnauthorizedError(message or "Graph access denied.")
        if response.status_code == 429:
            raise GraphThrottledError(message or "Graph request throttled.")
        raise GraphRequestError(message or f"Graph request failed with status {response.status_code}.")


class GraphClientFactory(Protocol):
    """Produces an authenticated directory client for one API call."""

    def create(self) -> GraphClient:
        ...


class CredentialGraphClientFactory:
    def __init__(self, credential: TokenCredential, settings: FinderSettings) -> None:
        self._credential = credential
        self._settings = settings

    def create(self) -> GraphClient:
        return GraphClient.from_settings(self._credential, self._settings)


__all__ = [
    "ACCESS_PACKAGES_PATH",
    "CredentialGraphClientFactory",
    "GraphClient",
    "GraphClientError",
    "GraphClientFactory",
    "GraphNotFoundError",
    "GraphRequestError",
    "GraphThrottledError",
    "GraphUnauthorizedError",
    "odata_string",
]
