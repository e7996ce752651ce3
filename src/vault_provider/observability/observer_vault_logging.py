# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging-backed observers for the vault provider.

``get_logger`` turns a ModelVaultLoggerConfig into a configured stdlib logger.
``VaultLoggingObserver`` reports session lifecycle notices on that logger.
``NullVaultObserver`` is used when the provider is built without a logger
configuration.

Security Note:
    Only the store address, auth type and sanitized error text are logged.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from vault_provider.enums import EnumVaultAuthType
from vault_provider.models import ModelVaultLoggerConfig
from vault_provider.utils import sanitize_error_message

CLI_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CLI_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed by get_logger so repeated calls do not stack them.
_HANDLER_MARKER = "_vault_provider_handler"

# LogRecord attributes that are not user-supplied ``extra`` fields.
_RESERVED_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JsonLineFormatter(logging.Formatter):
    """Format records as single-line JSON objects including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, sort_keys=True)


def get_logger(config: ModelVaultLoggerConfig) -> logging.Logger:
    """Return a logger configured from ``config``.

    Calling this twice with the same logger name replaces the handler
    instead of adding a second one. The logger does not propagate, so a
    host that configures the root logger sees each notice once.
    """
    logger = logging.getLogger(config.logger_name)
    logger.setLevel(getattr(logging, config.log_level))

    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    if config.log_style == "json":
        handler.setFormatter(JsonLineFormatter())
    else:
        handler.setFormatter(logging.Formatter(CLI_LOG_FORMAT, CLI_DATE_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


class VaultLoggingObserver:
    """ProtocolVaultObserver implementation writing to a stdlib logger."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @classmethod
    def from_config(cls, config: ModelVaultLoggerConfig) -> VaultLoggingObserver:
        """Build an observer on the logger described by ``config``."""
        return cls(get_logger(config))

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def on_initialized(self, vault_addr: str, auth_type: EnumVaultAuthType) -> None:
        self._logger.info(
            "Vault is successfully configured with address: %s and auth type: %s",
            vault_addr,
            auth_type.value,
            extra={"vault_addr": vault_addr, "auth_type": auth_type.value},
        )

    def on_authentication_failed(
        self, auth_type: EnumVaultAuthType, error: Exception
    ) -> None:
        self._logger.error(
            "Vault authentication error %s",
            sanitize_error_message(error),
            extra={"auth_type": auth_type.value, "error_type": type(error).__name__},
        )


class NullVaultObserver:
    """Observer that ignores every notice."""

    def on_initialized(self, vault_addr: str, auth_type: EnumVaultAuthType) -> None:
        return None

    def on_authentication_failed(
        self, auth_type: EnumVaultAuthType, error: Exception
    ) -> None:
        return None


__all__: list[str] = [
    "CLI_LOG_FORMAT",
    "JsonLineFormatter",
    "NullVaultObserver",
    "VaultLoggingObserver",
    "get_logger",
]
