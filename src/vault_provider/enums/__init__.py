# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Enumerations Module.

Exports:
    EnumVaultAuthType: Session authentication modes (TOKEN, USERPASS, LDAP)
    EnumVaultErrorVerdict: Failure classification verdicts for store calls
"""

from vault_provider.enums.enum_vault_auth_type import EnumVaultAuthType
from vault_provider.enums.enum_vault_error_verdict import EnumVaultErrorVerdict

__all__: list[str] = [
    "EnumVaultAuthType",
    "EnumVaultErrorVerdict",
]
