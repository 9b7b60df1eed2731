"""Finder configuration using pydantic-settings."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import ClassVar, Literal, Optional

from pydantic import Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_SERVICE_MARKER = "WEBSITE_INSTANCE_ID"
APP_SERVICE_LABEL = "Azure App Service"
LOCAL_LABEL = "Local Development"


class FinderApiSettings(BaseSettings):
    """Process/runtime settings for the finder API server."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="FINDER_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Bind address for the finder API.")
    port: PositiveInt = Field(default=3000, description="Port for the finder API.")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload (dev only).")
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = Field(
        default="info",
        description="Log level for finder API / uvicorn.",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Origins allowed to call the API from a browser.",
    )
    static_dir: Optional[str] = Field(
        default=None,
        description="Directory holding the static UI; mounted at / when present.",
    )


class FinderSettings(BaseSettings):
    """Validated settings for directory lookups and the access package search."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="FINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    graph_base_url: str = Field(
        default="https://graph.microsoft.com/v1.0",
        description="Base URL of the Microsoft Graph endpoint.",
    )
    graph_scope: str = Field(
        default="https://graph.microsoft.com/.default",
        description="Token scope requested from the credential.",
    )
    graph_timeout_seconds: PositiveFloat = Field(
        default=30,
        description="Timeout applied to every Graph call (seconds).",
    )
    credential_mode: Literal["auto", "managed_identity", "default"] = Field(
        default="auto",
        description="Credential strategy (auto picks managed identity on App Service).",
    )
    managed_identity_client_id: Optional[str] = Field(
        default=None,
        description="Client id of a user-assigned managed identity.",
    )
    search_max_concurrency: PositiveInt = Field(
        default=4,
        description="Maximum number of access package detail fetches in flight per search.",
    )
    search_timeout_seconds: PositiveFloat = Field(
        default=120,
        description="Overall deadline for a single search (seconds).",
    )
    group_ambiguity: Literal["first", "error"] = Field(
        default="first",
        description="How group resolution treats duplicate display names.",
    )
    max_pages: PositiveInt = Field(
        default=50,
        description="Maximum number of @odata.nextLink pages followed per list call.",
    )


def running_on_app_service() -> bool:
    return bool(os.environ.get(APP_SERVICE_MARKER))


def environment_label() -> str:
    """Return the human readable name of the hosting environment."""

    return APP_SERVICE_LABEL if running_on_app_service() else LOCAL_LABEL


@lru_cache()
def get_settings() -> FinderSettings:
    """Return memoized finder settings."""

    return FinderSettings()


@lru_cache()
def get_api_settings() -> FinderApiSettings:
    """Return memoized API process settings."""

    return FinderApiSettings()
