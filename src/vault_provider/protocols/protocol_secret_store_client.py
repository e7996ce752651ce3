# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for secret store client handles.

This module defines ProtocolSecretStoreClient, the capability-typed handle the
session manager owns. Calls are blocking; the session manager runs them in its
thread pool.

Architecture Context:
    - VaultSessionManager creates handles through a client factory and swaps
      them in place on re-authentication
    - VaultSecretAccessor never keeps a handle between attempts; it asks the
      session manager for the current one on every attempt
    - HvacSecretStoreClient is the production implementation

Error Handling:
    Implementations raise the backend's own exceptions unchanged. Mapping them
    onto provider errors is the job of ``classify_vault_error``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from vault_provider.enums import EnumVaultAuthType
    from vault_provider.models import ModelVaultProviderConfig

__all__ = [
    "ProtocolSecretStoreClient",
    "SecretStoreClientFactory",
]


@runtime_checkable
class ProtocolSecretStoreClient(Protocol):
    """Handle to an (optionally authenticated) secret store connection."""

    def login(
        self,
        auth_type: EnumVaultAuthType,
        username: str,
        password: str,
        mount_point: str | None = None,
    ) -> str:
        """Perform the login exchange and install the returned token.

        Returns:
            The client token issued by the store.
        """
        ...

    def write(self, path: str, payload: Mapping[str, object]) -> object:
        """Write ``payload`` at ``path``. Returns the store acknowledgement."""
        ...

    def read(self, path: str) -> Mapping[str, object]:
        """Read the raw response stored at ``path``."""
        ...

    def delete(self, path: str) -> object:
        """Delete the secret at ``path``. Returns the store acknowledgement."""
        ...


SecretStoreClientFactory = Callable[
    ["ModelVaultProviderConfig"], ProtocolSecretStoreClient
]
