# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Error Verdict Enumeration.

Classification outcomes for failures raised by the secret store client.
"""

from enum import Enum


class EnumVaultErrorVerdict(str, Enum):
    """Verdicts produced by ``classify_vault_error``.

    Attributes:
        NOT_FOUND: The secret does not exist at the requested path
        UNAVAILABLE: The store could not be reached (transport failure)
        ACCESS_DENIED_TRANSIENT: Permission denied, treated as an expired session
        ACCESS_DENIED_FATAL: Any other backend error, surfaced unchanged
    """

    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    ACCESS_DENIED_TRANSIENT = "access_denied_transient"
    ACCESS_DENIED_FATAL = "access_denied_fatal"

    @property
    def triggers_reauthentication(self) -> bool:
        """Return True if this verdict should re-authenticate and retry."""
        return self is EnumVaultErrorVerdict.ACCESS_DENIED_TRANSIENT


__all__ = ["EnumVaultErrorVerdict"]
