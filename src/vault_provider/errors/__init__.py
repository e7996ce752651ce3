# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Errors Module.

Exports:
    ModelVaultErrorContext: Bundled operation context for errors
    VaultProviderError: Base error class
    RequiredVaultOptionsMissing: Configuration validation error
    VaultAuthenticationError: Login exchange failure
    ResourceNotFoundError: Secret does not exist for an entity
    AccessUnavailableError: Store unreachable at the transport layer

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Tokens, passwords or secret values
        - Full store responses (they may echo secret data)

    SAFE to include:
        - Store address and auth type
        - Operation names and entity ids
        - Correlation IDs
"""

from vault_provider.errors.model_vault_error_context import ModelVaultErrorContext
from vault_provider.errors.vault_errors import (
    AccessUnavailableError,
    RequiredVaultOptionsMissing,
    ResourceNotFoundError,
    VaultAuthenticationError,
    VaultProviderError,
)

__all__: list[str] = [
    "ModelVaultErrorContext",
    "VaultProviderError",
    "RequiredVaultOptionsMissing",
    "VaultAuthenticationError",
    "ResourceNotFoundError",
    "AccessUnavailableError",
]
