# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Utilities Module.

Exports:
    classify_vault_error: Map store failures onto EnumVaultErrorVerdict
    run_blocking: Run a blocking call in a thread pool with a timeout
    sanitize_error_message: Redact credentials from exception messages
    sanitize_error_string: Redact credentials from raw error strings
"""

from vault_provider.utils.util_blocking_call import run_blocking
from vault_provider.utils.util_error_classification import classify_vault_error
from vault_provider.utils.util_error_sanitization import (
    REDACTED_MESSAGE,
    SENSITIVE_PATTERNS,
    sanitize_error_message,
    sanitize_error_string,
)

__all__: list[str] = [
    "REDACTED_MESSAGE",
    "SENSITIVE_PATTERNS",
    "classify_vault_error",
    "run_blocking",
    "sanitize_error_message",
    "sanitize_error_string",
]
