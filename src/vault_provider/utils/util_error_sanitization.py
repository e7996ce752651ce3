# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization for vault provider logs and errors.

Backend errors can echo request data. Before an exception message reaches a
log line or an observer, it is passed through these helpers so that tokens,
passwords and secret payloads never leave the process.

Example:
    >>> from vault_provider.utils import sanitize_error_message
    >>> safe = sanitize_error_message(ValueError("login failed: password=hunter2"))
    >>> "hunter2" in safe
    False
    >>> safe.startswith("ValueError:")
    True
"""

from __future__ import annotations

REDACTED_MESSAGE: str = "[REDACTED - potentially sensitive data]"

# Checked case-insensitively against the message text.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Credentials
    "password",
    "passwd",
    "secret",
    "credential",
    # Vault tokens and headers
    "token",
    "x-vault-token",
    "hvs.",
    "hvb.",
    "client_token",
    "accessor",
    "bearer",
    "authorization",
    # Secret payload markers
    "'value'",
    '"value"',
    # Key material
    "-----begin",
    "private_key",
)


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for logging.

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the returned message

    Returns:
        The original string, a redaction marker if a sensitive pattern was
        found, or a truncated string if it exceeded ``max_length``.
    """
    if not error_str:
        return ""

    lowered = error_str.lower()
    if any(pattern in lowered for pattern in SENSITIVE_PATTERNS):
        return REDACTED_MESSAGE

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"
    return error_str


def sanitize_error_message(exception: BaseException, max_length: int = 500) -> str:
    """Sanitize an exception for logging as ``"{ExceptionType}: {message}"``.

    Args:
        exception: The exception to sanitize
        max_length: Maximum length of the message part

    Returns:
        Sanitized message prefixed with the exception type name.
    """
    exception_type = type(exception).__name__
    sanitized = sanitize_error_string(str(exception), max_length=max_length)
    if not sanitized:
        return exception_type
    return f"{exception_type}: {sanitized}"


__all__: list[str] = [
    "REDACTED_MESSAGE",
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
]
