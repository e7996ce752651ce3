# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider - client-side access layer for HashiCorp Vault secrets.

Stores one opaque value per entity id under a configured path prefix and
keeps the Vault session alive:

- Token, userpass and LDAP authentication
- Re-authenticate and retry once when Vault answers "permission denied"
- Typed errors for missing secrets and an unreachable store
- Optional logging observer for session lifecycle notices

Key Components:
    - VaultProvider: public facade (initialize, write, read, delete)
    - VaultSessionManager: owns the authenticated hvac handle
    - VaultSecretAccessor: entity-keyed operations and the retry policy
    - classify_vault_error: failure classification
"""

from vault_provider.enums import EnumVaultAuthType, EnumVaultErrorVerdict
from vault_provider.errors import (
    AccessUnavailableError,
    ModelVaultErrorContext,
    RequiredVaultOptionsMissing,
    ResourceNotFoundError,
    VaultAuthenticationError,
    VaultProviderError,
)
from vault_provider.handlers import (
    HvacSecretStoreClient,
    VaultProvider,
    VaultSecretAccessor,
    VaultSessionManager,
)
from vault_provider.models import (
    ModelVaultLoggerConfig,
    ModelVaultProviderConfig,
    parse_vault_config,
)
from vault_provider.utils import classify_vault_error

__version__ = "0.1.0"

__all__: list[str] = [
    "AccessUnavailableError",
    "EnumVaultAuthType",
    "EnumVaultErrorVerdict",
    "HvacSecretStoreClient",
    "ModelVaultErrorContext",
    "ModelVaultLoggerConfig",
    "ModelVaultProviderConfig",
    "RequiredVaultOptionsMissing",
    "ResourceNotFoundError",
    "VaultAuthenticationError",
    "VaultProvider",
    "VaultProviderError",
    "VaultSecretAccessor",
    "VaultSessionManager",
    "classify_vault_error",
    "parse_vault_config",
]
