# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider - entity-keyed secret storage on HashiCorp Vault.

Public facade combining VaultSessionManager and VaultSecretAccessor.

Usage:
    >>> provider = VaultProvider(
    ...     ModelVaultProviderConfig.from_env(),
    ...     ModelVaultLoggerConfig(app_name="billing", module_name="vault"),
    ... )
    >>> await provider.initialize()
    >>> await provider.write("tenant-42", {"api_key": "..."})
    >>> await provider.read("tenant-42")
    {'api_key': '...'}
    >>> await provider.delete("tenant-42")

Security Features:
    - Credentials held as SecretStr in configuration
    - describe() returns metadata only, never credentials
    - Error and log messages pass through sanitize_error_message
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Generic

from vault_provider.handlers.handler_vault_secrets import VaultSecretAccessor
from vault_provider.handlers.handler_vault_session import VaultSessionManager
from vault_provider.models import (
    ModelVaultLoggerConfig,
    ModelVaultProviderConfig,
    SecretValueT,
    parse_vault_config,
)
from vault_provider.observability import VaultLoggingObserver
from vault_provider.protocols import ProtocolVaultObserver, SecretStoreClientFactory

logger = logging.getLogger(__name__)


class VaultProvider(Generic[SecretValueT]):
    """Create, read and delete secrets keyed by entity id.

    ``initialize()`` must complete before any other operation. Write, read
    and delete re-authenticate and retry once when the store answers
    "permission denied", which in this deployment model means the session
    token expired.

    Args:
        config: Validated configuration or a raw mapping (snake_case or the
            legacy camelCase keys)
        logger_config: Optional observability configuration; when given, a
            VaultLoggingObserver is built from it
        observer: Explicit observer, takes precedence over ``logger_config``
        client_factory: Builds the secret store handle; defaults to
            HvacSecretStoreClient.from_config

    Raises:
        RequiredVaultOptionsMissing: If a raw ``config`` mapping does not
            validate.
    """

    def __init__(
        self,
        config: ModelVaultProviderConfig | Mapping[str, object],
        logger_config: ModelVaultLoggerConfig | None = None,
        *,
        observer: ProtocolVaultObserver | None = None,
        client_factory: SecretStoreClientFactory | None = None,
    ) -> None:
        if not isinstance(config, ModelVaultProviderConfig):
            config = parse_vault_config(config)
        if observer is None and logger_config is not None:
            observer = VaultLoggingObserver.from_config(logger_config)

        self._config = config
        self._session = VaultSessionManager(
            config,
            observer=observer,
            client_factory=client_factory,
        )
        self._secrets: VaultSecretAccessor[SecretValueT] = VaultSecretAccessor(
            config, self._session
        )

    @property
    def config(self) -> ModelVaultProviderConfig:
        return self._config

    @property
    def session(self) -> VaultSessionManager:
        return self._session

    @property
    def initialized(self) -> bool:
        """Return True once a session is established."""
        return self._session.is_established

    async def initialize(self) -> None:
        """Establish the Vault session.

        Raises:
            VaultAuthenticationError: If the login exchange fails.
        """
        await self._session.initialize()

    async def write(self, entity_id: str, value: SecretValueT) -> object:
        """Store ``value`` for ``entity_id``; returns the store acknowledgement."""
        return await self._secrets.write(entity_id, value)

    async def read(self, entity_id: str) -> SecretValueT | None:
        """Return the value stored for ``entity_id``."""
        return await self._secrets.read(entity_id)

    async def delete(self, entity_id: str) -> object:
        """Delete the secret of ``entity_id``; returns the store acknowledgement."""
        return await self._secrets.delete(entity_id)

    async def shutdown(self) -> None:
        """Release the session and its thread pool; ``initialize`` may follow."""
        await self._session.shutdown()
        logger.info("VaultProvider shutdown complete")

    async def __aenter__(self) -> VaultProvider[SecretValueT]:
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()

    def describe(self) -> dict[str, object]:
        """Return provider metadata without credentials."""
        return {
            "vault_addr": self._config.vault_addr,
            "vault_secret_path": self._config.vault_secret_path,
            "vault_auth_type": self._config.vault_auth_type.value,
            "namespace": self._config.namespace,
            "timeout_seconds": self._config.timeout_seconds,
            "initialized": self.initialized,
            "reauthentication_count": self._session.reauthentication_count,
        }


__all__: list[str] = ["VaultProvider"]
