# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault session manager.

Owns the authenticated secret store handle and the thread pool its blocking
calls run on.

Session Lifecycle:
    absent -> established (initialize succeeds)
    established -> superseded (reauthenticate builds a new handle and swaps it
    in by plain attribute assignment; the old handle is dropped)

    A failed login leaves no handle installed. Operations then fail with
    "not initialized" until a later initialize succeeds.

Concurrency:
    There is no lock around session replacement. Two operations that are
    denied at the same time may both re-authenticate. A sibling operation
    already in flight keeps the handle it started with; it sees the new handle
    on its next attempt because ``run`` reads the current handle per call.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar
from uuid import UUID, uuid4

from vault_provider.errors import (
    ModelVaultErrorContext,
    VaultAuthenticationError,
    VaultProviderError,
)
from vault_provider.handlers.handler_hvac_client import HvacSecretStoreClient
from vault_provider.models import ModelVaultProviderConfig
from vault_provider.observability import NullVaultObserver
from vault_provider.protocols import (
    ProtocolSecretStoreClient,
    ProtocolVaultObserver,
    SecretStoreClientFactory,
)
from vault_provider.utils import run_blocking, sanitize_error_message

T = TypeVar("T")

logger = logging.getLogger(__name__)


class VaultSessionManager:
    """Establishes and refreshes the authenticated secret store handle."""

    def __init__(
        self,
        config: ModelVaultProviderConfig,
        *,
        observer: ProtocolVaultObserver | None = None,
        client_factory: SecretStoreClientFactory | None = None,
    ) -> None:
        self._config = config
        self._observer: ProtocolVaultObserver = observer or NullVaultObserver()
        self._client_factory: SecretStoreClientFactory = (
            client_factory or HvacSecretStoreClient.from_config
        )
        self._client: ProtocolSecretStoreClient | None = None
        self._executor: ThreadPoolExecutor | None = None
        self._reauthentication_count: int = 0

    @property
    def is_established(self) -> bool:
        """Return True once a session handle is installed."""
        return self._client is not None

    @property
    def reauthentication_count(self) -> int:
        """Return how many times ``reauthenticate`` has been called."""
        return self._reauthentication_count

    def _create_error_context(
        self, operation: str, correlation_id: UUID
    ) -> ModelVaultErrorContext:
        return ModelVaultErrorContext(
            operation=operation,
            target_name=self._config.vault_addr,
            correlation_id=correlation_id,
        )

    def _ensure_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._config.max_concurrent_operations,
                thread_name_prefix="vault_provider_",
            )
        return self._executor

    async def initialize(self, correlation_id: UUID | None = None) -> None:
        """Establish a session, replacing any existing handle.

        Token mode embeds the configured token in a new handle without any
        network round trip. Login modes run the userpass or LDAP exchange and
        install the returned token. Safe to call repeatedly.

        Args:
            correlation_id: Optional correlation ID for tracing

        Raises:
            VaultAuthenticationError: If the login exchange fails. Never
                retried here.
        """
        correlation_id = correlation_id or uuid4()
        auth_type = self._config.vault_auth_type
        self._ensure_executor()

        client = self._client_factory(self._config)
        if auth_type.requires_login:
            await self._login(client, correlation_id)

        self._client = client
        logger.info(
            "Vault session established",
            extra={
                "vault_addr": self._config.vault_addr,
                "auth_type": auth_type.value,
                "correlation_id": str(correlation_id),
            },
        )
        self._observer.on_initialized(self._config.vault_addr, auth_type)

    async def _login(
        self, client: ProtocolSecretStoreClient, correlation_id: UUID
    ) -> None:
        auth_type = self._config.vault_auth_type
        username = self._config.vault_user or ""
        password = (
            self._config.vault_password.get_secret_value()
            if self._config.vault_password
            else ""
        )
        login = functools.partial(
            client.login,
            auth_type,
            username,
            password,
            self._config.mount_point,
        )
        try:
            await run_blocking(
                login,
                executor=self._executor,
                timeout_seconds=self._config.timeout_seconds,
            )
        except Exception as e:
            self._client = None
            logger.warning(
                "Vault login exchange failed",
                extra={
                    "auth_type": auth_type.value,
                    "error": sanitize_error_message(e),
                    "correlation_id": str(correlation_id),
                },
            )
            self._observer.on_authentication_failed(auth_type, e)
            raise VaultAuthenticationError(
                f"Vault authentication failed using auth type '{auth_type.value}'",
                context=self._create_error_context("authenticate", correlation_id),
                cause=e,
                auth_type=auth_type.value,
            ) from e

    async def reauthenticate(self, correlation_id: UUID | None = None) -> None:
        """Replace the session with a freshly authenticated one."""
        self._reauthentication_count += 1
        await self.initialize(correlation_id)

    def require_client(
        self, correlation_id: UUID | None = None
    ) -> ProtocolSecretStoreClient:
        """Return the current handle.

        Raises:
            VaultProviderError: If no session has been established.
        """
        if self._client is None:
            raise VaultProviderError(
                "Vault session not initialized. Call initialize() first.",
                context=self._create_error_context(
                    "require_client", correlation_id or uuid4()
                ),
            )
        return self._client

    async def run(
        self,
        call: Callable[[ProtocolSecretStoreClient], T],
        correlation_id: UUID | None = None,
    ) -> T:
        """Run ``call`` against the current handle in the session thread pool."""
        client = self.require_client(correlation_id)
        return await run_blocking(
            functools.partial(call, client),
            executor=self._executor,
            timeout_seconds=self._config.timeout_seconds,
        )

    async def shutdown(self) -> None:
        """Drop the session handle and release the thread pool."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._client = None
        logger.info(
            "Vault session closed",
            extra={"vault_addr": self._config.vault_addr},
        )


__all__: list[str] = ["VaultSessionManager"]
