# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Classification of secret store failures.

Maps an exception raised by a secret store call onto an EnumVaultErrorVerdict:

    ============================================  ========================
    Signal                                        Verdict
    ============================================  ========================
    hvac InvalidPath, HTTP 404, "Status 404"      NOT_FOUND
    requests transport errors, timeouts,          UNAVAILABLE
    hvac VaultDown
    hvac Forbidden, "permission denied"           ACCESS_DENIED_TRANSIENT
    anything else                                 ACCESS_DENIED_FATAL
    ============================================  ========================

"permission denied" is read as an expired session token. The store does not
report token expiry separately, so a genuine authorization failure costs one
extra re-authentication before it surfaces.
"""

from __future__ import annotations

from http import HTTPStatus

import hvac.exceptions
import requests.exceptions

from vault_provider.enums import EnumVaultErrorVerdict

_NOT_FOUND_MESSAGE = "Status 404"
_PERMISSION_DENIED = "permission denied"

_UNAVAILABLE_ERRORS: tuple[type[BaseException], ...] = (
    requests.exceptions.RequestException,
    hvac.exceptions.VaultDown,
    TimeoutError,
    ConnectionError,
)


def _status_code(error: BaseException) -> int | None:
    """Return the HTTP status carried by ``error``, if any."""
    status = getattr(error, "status_code", None)
    if isinstance(status, int):
        return status
    response = getattr(error, "response", None)
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


def _reports_permission_denied(error: BaseException) -> bool:
    """Return True if the backend error text says "permission denied"."""
    backend_errors = getattr(error, "errors", None)
    if isinstance(backend_errors, list | tuple):
        if any(_PERMISSION_DENIED in str(item).lower() for item in backend_errors):
            return True
    return _PERMISSION_DENIED in str(error).lower()


def classify_vault_error(error: BaseException) -> EnumVaultErrorVerdict:
    """Classify a secret store failure.

    Args:
        error: Exception raised by a ProtocolSecretStoreClient call

    Returns:
        The verdict driving the accessor's error handling.
    """
    if (
        isinstance(error, hvac.exceptions.InvalidPath)
        or _status_code(error) == HTTPStatus.NOT_FOUND
        or str(error) == _NOT_FOUND_MESSAGE
    ):
        return EnumVaultErrorVerdict.NOT_FOUND

    if isinstance(error, _UNAVAILABLE_ERRORS):
        return EnumVaultErrorVerdict.UNAVAILABLE

    if isinstance(error, hvac.exceptions.Forbidden) or _reports_permission_denied(
        error
    ):
        return EnumVaultErrorVerdict.ACCESS_DENIED_TRANSIENT

    return EnumVaultErrorVerdict.ACCESS_DENIED_FATAL


__all__: list[str] = ["classify_vault_error"]
