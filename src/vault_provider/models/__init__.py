# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Models Module.

Exports:
    ModelVaultProviderConfig: Validated provider configuration
    ModelVaultLoggerConfig: Optional observer/logger configuration
    ModelSecretRecord: Entity id and opaque secret value
    ModelReauthRetryState: Bounded re-authentication attempt state
    parse_vault_config: Raw mapping to validated configuration
"""

from vault_provider.models.model_reauth_retry_state import ModelReauthRetryState
from vault_provider.models.model_secret_record import ModelSecretRecord, SecretValueT
from vault_provider.models.model_vault_logger_config import ModelVaultLoggerConfig
from vault_provider.models.model_vault_provider_config import (
    ModelVaultProviderConfig,
    parse_vault_config,
)

__all__: list[str] = [
    "ModelReauthRetryState",
    "ModelSecretRecord",
    "ModelVaultLoggerConfig",
    "ModelVaultProviderConfig",
    "SecretValueT",
    "parse_vault_config",
]
