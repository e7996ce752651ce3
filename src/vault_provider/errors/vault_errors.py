# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Error Classes.

Error Hierarchy:
    VaultProviderError (base, HTTP 500)
    ├── RequiredVaultOptionsMissing (configuration, HTTP 500)
    ├── VaultAuthenticationError (login exchange, HTTP 401)
    ├── ResourceNotFoundError (missing secret, HTTP 404)
    └── AccessUnavailableError (store unreachable, HTTP 503)

All errors:
    - Carry an HTTP status, a stable error code and an ``is_public`` flag so
      hosting services can map them onto API responses
    - Keep the original exception as ``cause`` and support ``raise ... from e``
    - Accept ModelVaultErrorContext for operation/target/correlation fields
    - Never include credentials in their message or context
"""

from __future__ import annotations

from http import HTTPStatus

from vault_provider.errors.model_vault_error_context import ModelVaultErrorContext


class VaultProviderError(Exception):
    """Base error class for the vault provider.

    Example:
        >>> context = ModelVaultErrorContext(operation="read", target_name="vault")
        >>> raise VaultProviderError("Operation failed", context=context, retry_count=1)
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    code: str = "error.unexpected"
    is_public: bool = False

    def __init__(
        self,
        message: str,
        context: ModelVaultErrorContext | None = None,
        cause: BaseException | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize VaultProviderError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled operation context
            cause: Original exception, if any
            **extra_context: Additional non-sensitive context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.cause = cause
        self.correlation_id = context.correlation_id if context else None

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
        self.extra_context = structured_context

    @property
    def name(self) -> str:
        """Return the error class name."""
        return type(self).__name__

    def to_dict(self) -> dict[str, object]:
        """Serialize the error for API responses and structured logs."""
        payload: dict[str, object] = {
            "name": self.name,
            "message": self.message,
            "status": int(self.status),
            "code": self.code,
            "is_public": self.is_public,
        }
        if self.correlation_id is not None:
            payload["correlation_id"] = str(self.correlation_id)
        payload.update(self.extra_context)
        return payload


class RequiredVaultOptionsMissing(VaultProviderError):
    """Raised when required vault configuration options are absent.

    Raised before any network activity and never retried.
    """

    is_public = True

    def __init__(
        self,
        missing_options: tuple[str, ...] | list[str] = (),
        context: ModelVaultErrorContext | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            "Vault Provider Required Options are missing",
            context=context,
            cause=cause,
            missing_options=list(missing_options),
        )
        self.missing_options = tuple(missing_options)


class VaultAuthenticationError(VaultProviderError):
    """Raised when the login exchange with the store fails.

    Fatal for ``initialize``; the caller decides whether to abort.
    """

    status = HTTPStatus.UNAUTHORIZED
    code = "error.vault.authentication-failed"

    def __init__(
        self,
        message: str = "Vault authentication failed",
        context: ModelVaultErrorContext | None = None,
        cause: BaseException | None = None,
        auth_type: str | None = None,
        **extra_context: object,
    ) -> None:
        if auth_type is not None:
            extra_context["auth_type"] = auth_type
        super().__init__(message, context=context, cause=cause, **extra_context)


class ResourceNotFoundError(VaultProviderError):
    """Raised when the store reports that an entity has no secret."""

    status = HTTPStatus.NOT_FOUND
    code = "error.resource.not-found"
    is_public = True

    def __init__(
        self,
        entity_id: str,
        cause: BaseException | None = None,
        context: ModelVaultErrorContext | None = None,
    ) -> None:
        super().__init__(
            f"Resource not found: {entity_id}",
            context=context,
            cause=cause,
            entity_id=entity_id,
        )
        self.entity_id = entity_id


class AccessUnavailableError(VaultProviderError):
    """Raised when the store cannot be reached at the transport layer."""

    status = HTTPStatus.SERVICE_UNAVAILABLE
    code = "error.vault.not-accessible"
    is_public = True

    def __init__(
        self,
        cause: BaseException | None = None,
        context: ModelVaultErrorContext | None = None,
    ) -> None:
        super().__init__(
            "Vault access failed. We are working on fixing this issue.",
            context=context,
            cause=cause,
        )


__all__ = [
    "AccessUnavailableError",
    "RequiredVaultOptionsMissing",
    "ResourceNotFoundError",
    "VaultAuthenticationError",
    "VaultProviderError",
]
