"""Credential strategy selection for directory access."""

from __future__ import annotations

import logging

from azure.core.credentials import TokenCredential
from azure.identity import DefaultAzureCredential, ManagedIdentityCredential

from finder_api.config.settings import FinderSettings, running_on_app_service

LOGGER = logging.getLogger(__name__)


def select_credential(settings: FinderSettings) -> TokenCredential:
    """Pick the managed identity on App Service, the default chain elsewhere.

    ``credential_mode`` overrides the environment detection. The default chain
    covers developer machines (Azure CLI, VS Code, environment variables).
    """

    mode = settings.credential_mode
    if mode == "auto":
        mode = "managed_identity" if running_on_app_service() else "default"

    if mode == "managed_identity":
        LOGGER.info("Using managed identity credential")
        if settings.managed_identity_client_id:
            return ManagedIdentityCredential(client_id=settings.managed_identity_client_id)
        return ManagedIdentityCredential()

    LOGGER.info("Using default Azure credential chain")
    if settings.managed_identity_client_id:
        return DefaultAzureCredential(managed_identity_client_id=settings.managed_identity_client_id)
    return DefaultAzureCredential()
