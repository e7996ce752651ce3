# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Authentication Type Enumeration.

Defines the login methods supported when establishing a Vault session.
"""

from __future__ import annotations

from enum import Enum


class EnumVaultAuthType(str, Enum):
    """Authentication modes for the Vault session.

    Attributes:
        TOKEN: Static token embedded in the client handle, no login round trip
        USERPASS: Generic username/password grant (``auth/userpass``)
        LDAP: Directory-service bind grant (``auth/ldap``)
    """

    TOKEN = "token"
    USERPASS = "userpass"
    LDAP = "ldap"

    @classmethod
    def parse(cls, raw: str | EnumVaultAuthType) -> EnumVaultAuthType:
        """Resolve an auth type from its value or a known alias.

        ``password`` maps to USERPASS and ``directory-service`` to LDAP.
        Any other non-token value resolves to USERPASS.
        """
        if isinstance(raw, cls):
            return raw
        normalized = str(raw).strip().lower()
        if normalized in _ALIASES:
            return _ALIASES[normalized]
        return cls.USERPASS

    @property
    def requires_login(self) -> bool:
        """Return True when a login exchange is needed to obtain a token."""
        return self is not EnumVaultAuthType.TOKEN

    @property
    def default_mount_point(self) -> str:
        """Return the Vault auth mount point for login-based modes."""
        return self.value


_ALIASES: dict[str, EnumVaultAuthType] = {
    "token": EnumVaultAuthType.TOKEN,
    "userpass": EnumVaultAuthType.USERPASS,
    "password": EnumVaultAuthType.USERPASS,
    "ldap": EnumVaultAuthType.LDAP,
    "directory-service": EnumVaultAuthType.LDAP,
}


__all__ = ["EnumVaultAuthType"]
