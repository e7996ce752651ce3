# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Handlers Module.

Exports:
    HvacSecretStoreClient: hvac-backed secret store handle
    VaultSessionManager: Session establishment and re-authentication
    VaultSecretAccessor: Write/read/delete with retry-once-after-reauth
    VaultProvider: Public facade
"""

from vault_provider.handlers.handler_hvac_client import HvacSecretStoreClient
from vault_provider.handlers.handler_vault_provider import VaultProvider
from vault_provider.handlers.handler_vault_secrets import VaultSecretAccessor
from vault_provider.handlers.handler_vault_session import VaultSessionManager

__all__: list[str] = [
    "HvacSecretStoreClient",
    "VaultProvider",
    "VaultSecretAccessor",
    "VaultSessionManager",
]
