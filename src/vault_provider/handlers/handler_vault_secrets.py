# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault secret accessor.

Write, read and delete operations over entity ids. Every operation goes
through ``_execute_with_reauth``:

    1. Run the store call on the current session handle
    2. On failure, classify it with ``classify_vault_error``
    3. ACCESS_DENIED_TRANSIENT with retries left: re-authenticate, go to 1
    4. NOT_FOUND: raise ResourceNotFoundError(entity_id)
    5. UNAVAILABLE: raise AccessUnavailableError
    6. Anything else, including a second permission denial: re-raise the
       original exception unchanged

The loop allows one re-authentication per logical operation. If the
re-authentication itself fails, its VaultAuthenticationError propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Generic, NoReturn, TypeVar
from uuid import UUID, uuid4

from pydantic import ValidationError

from vault_provider.enums import EnumVaultErrorVerdict
from vault_provider.errors import (
    AccessUnavailableError,
    ModelVaultErrorContext,
    ResourceNotFoundError,
    VaultProviderError,
)
from vault_provider.handlers.handler_vault_session import VaultSessionManager
from vault_provider.models import (
    ModelReauthRetryState,
    ModelSecretRecord,
    ModelVaultProviderConfig,
    SecretValueT,
)
from vault_provider.protocols import ProtocolSecretStoreClient
from vault_provider.utils import classify_vault_error, sanitize_error_message

T = TypeVar("T")

logger = logging.getLogger(__name__)


class VaultSecretAccessor(Generic[SecretValueT]):
    """Entity-keyed secret operations with retry-once-after-reauth."""

    def __init__(
        self,
        config: ModelVaultProviderConfig,
        session: VaultSessionManager,
    ) -> None:
        self._config = config
        self._session = session

    def _create_error_context(
        self, operation: str, correlation_id: UUID
    ) -> ModelVaultErrorContext:
        return ModelVaultErrorContext(
            operation=operation,
            target_name=self._config.vault_addr,
            correlation_id=correlation_id,
        )

    def _record(
        self,
        operation: str,
        entity_id: str,
        correlation_id: UUID,
        value: SecretValueT | None = None,
    ) -> ModelSecretRecord[SecretValueT]:
        """Validate ``entity_id`` as a single path segment.

        Raises:
            VaultProviderError: If the id is empty, contains '/' or is a dot
                segment.
        """
        try:
            return ModelSecretRecord(entity_id=entity_id, value=value)
        except ValidationError as e:
            raise VaultProviderError(
                f"Invalid entity id {entity_id!r}",
                context=self._create_error_context(operation, correlation_id),
                cause=e,
                entity_id=entity_id,
            ) from e

    async def write(self, entity_id: str, value: SecretValueT) -> object:
        """Store ``value`` for ``entity_id``.

        Issues a write of ``{"data": {"value": value}}`` at
        ``<secret_path>/<entity_id>``.

        Returns:
            The store acknowledgement. Callers should only rely on it being
            truthy.
        """
        correlation_id = uuid4()
        record = self._record("write", entity_id, correlation_id, value)
        path = record.path(self._config.vault_secret_path)
        payload = record.to_payload()

        def write_func(client: ProtocolSecretStoreClient) -> object:
            return client.write(path, payload)

        return await self._execute_with_reauth(
            "write", entity_id, write_func, correlation_id
        )

    async def read(self, entity_id: str) -> SecretValueT | None:
        """Return the value stored for ``entity_id``.

        Raises:
            ResourceNotFoundError: If the store has no secret for the entity.
            VaultProviderError: If the response is not shaped
                ``{"data": {"data": {"value": ...}}}``.
        """
        correlation_id = uuid4()
        path = self._record("read", entity_id, correlation_id).path(
            self._config.vault_secret_path
        )

        def read_func(client: ProtocolSecretStoreClient) -> Mapping[str, object]:
            return client.read(path)

        response = await self._execute_with_reauth(
            "read", entity_id, read_func, correlation_id
        )
        try:
            record: ModelSecretRecord[SecretValueT] = ModelSecretRecord.from_response(
                entity_id, response
            )
        except ValueError as e:
            raise VaultProviderError(
                "Vault returned a malformed secret payload",
                context=self._create_error_context("read", correlation_id),
                cause=e,
                entity_id=entity_id,
            ) from e
        return record.value

    async def delete(self, entity_id: str) -> object:
        """Delete the secret stored for ``entity_id``.

        Returns:
            The store acknowledgement.
        """
        correlation_id = uuid4()
        path = self._record("delete", entity_id, correlation_id).path(
            self._config.vault_secret_path
        )

        def delete_func(client: ProtocolSecretStoreClient) -> object:
            return client.delete(path)

        return await self._execute_with_reauth(
            "delete", entity_id, delete_func, correlation_id
        )

    async def _execute_with_reauth(
        self,
        operation: str,
        entity_id: str,
        call: Callable[[ProtocolSecretStoreClient], T],
        correlation_id: UUID | None = None,
    ) -> T:
        """Run ``call``, re-authenticating and retrying at most once.

        Args:
            operation: Operation name for logging and error context
            entity_id: Entity the operation targets
            call: Blocking store call taking the current handle
            correlation_id: Optional correlation ID for tracing

        Returns:
            Result of ``call``.

        Raises:
            ResourceNotFoundError: NOT_FOUND verdict
            AccessUnavailableError: UNAVAILABLE verdict
            VaultAuthenticationError: Re-authentication failed
            Exception: The original error for any other verdict
        """
        correlation_id = correlation_id or uuid4()
        self._session.require_client(correlation_id)
        retry_state = ModelReauthRetryState()

        while True:
            try:
                result = await self._session.run(call, correlation_id)
            except VaultProviderError:
                raise
            except Exception as e:
                verdict = classify_vault_error(e)
                if (
                    verdict.triggers_reauthentication
                    and retry_state.can_reauthenticate()
                ):
                    retry_state = retry_state.next_attempt(sanitize_error_message(e))
                    logger.warning(
                        "Vault permission denied, re-authenticating and retrying",
                        extra={
                            "operation": operation,
                            "entity_id": entity_id,
                            "attempt": retry_state.attempt,
                            "max_reauth_attempts": retry_state.max_reauth_attempts,
                            "last_error": retry_state.last_error,
                            "correlation_id": str(correlation_id),
                        },
                    )
                    await self._session.reauthenticate(correlation_id)
                    continue
                self._raise_for_verdict(
                    verdict, e, operation, entity_id, correlation_id
                )

            logger.debug(
                "Vault operation completed",
                extra={
                    "operation": operation,
                    "entity_id": entity_id,
                    "reauth_attempts": retry_state.attempt,
                    "correlation_id": str(correlation_id),
                },
            )
            return result

    def _raise_for_verdict(
        self,
        verdict: EnumVaultErrorVerdict,
        error: Exception,
        operation: str,
        entity_id: str,
        correlation_id: UUID,
    ) -> NoReturn:
        """Surface ``error`` according to its verdict."""
        logger.debug(
            "Vault operation failed",
            extra={
                "operation": operation,
                "entity_id": entity_id,
                "verdict": verdict.value,
                "error": sanitize_error_message(error),
                "correlation_id": str(correlation_id),
            },
        )
        ctx = self._create_error_context(operation, correlation_id)
        if verdict is EnumVaultErrorVerdict.NOT_FOUND:
            raise ResourceNotFoundError(entity_id, cause=error, context=ctx) from error
        if verdict is EnumVaultErrorVerdict.UNAVAILABLE:
            raise AccessUnavailableError(cause=error, context=ctx) from error
        raise error


__all__: list[str] = ["VaultSecretAccessor"]
