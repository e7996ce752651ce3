# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Protocols Module.

Exports:
    ProtocolSecretStoreClient: Capability-typed secret store handle
    ProtocolVaultObserver: Session lifecycle observer
    SecretStoreClientFactory: Callable building a handle from configuration
"""

from vault_provider.protocols.protocol_secret_store_client import (
    ProtocolSecretStoreClient,
    SecretStoreClientFactory,
)
from vault_provider.protocols.protocol_vault_observer import ProtocolVaultObserver

__all__: list[str] = [
    "ProtocolSecretStoreClient",
    "ProtocolVaultObserver",
    "SecretStoreClientFactory",
]
