# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Observability Module."""

from vault_provider.observability.observer_vault_logging import (
    CLI_LOG_FORMAT,
    JsonLineFormatter,
    NullVaultObserver,
    VaultLoggingObserver,
    get_logger,
)

__all__: list[str] = [
    "CLI_LOG_FORMAT",
    "JsonLineFormatter",
    "NullVaultObserver",
    "VaultLoggingObserver",
    "get_logger",
]
