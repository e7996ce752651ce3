# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for vault provider observers.

Observers are injected at construction and called only at two extension
points: successful session initialization and authentication failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from vault_provider.enums import EnumVaultAuthType

__all__ = [
    "ProtocolVaultObserver",
]


@runtime_checkable
class ProtocolVaultObserver(Protocol):
    """Receives vault session lifecycle notices."""

    def on_initialized(self, vault_addr: str, auth_type: EnumVaultAuthType) -> None:
        """Called after a session has been established."""
        ...

    def on_authentication_failed(
        self, auth_type: EnumVaultAuthType, error: Exception
    ) -> None:
        """Called when the login exchange fails, before the error propagates."""
        ...
