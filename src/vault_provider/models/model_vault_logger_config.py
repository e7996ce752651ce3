# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Logger Configuration Model.

Optional observability configuration passed to VaultProvider at construction.
When present, the provider builds a VaultLoggingObserver from it.
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

_VALID_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ModelVaultLoggerConfig(BaseModel):
    """Logger settings for the vault provider observer.

    Attributes:
        app_name: Hosting application name (first logger name segment)
        module_name: Component name (second logger name segment)
        log_level: Minimum level emitted (DEBUG..CRITICAL)
        log_style: "cli" for human-readable lines, "json" for JSON lines
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    app_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("app_name", "appName"),
    )
    module_name: str = Field(
        default="vault-provider",
        min_length=1,
        validation_alias=AliasChoices("module_name", "moduleName"),
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("log_level", "logLevel"),
    )
    log_style: Literal["cli", "json"] = Field(
        default="cli",
        validation_alias=AliasChoices("log_style", "logStyle"),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and validate the log level name."""
        level = value.strip().upper()
        if level not in _VALID_LEVELS:
            raise ValueError(
                f"Invalid log level '{value}'. "
                f"Valid levels: {', '.join(sorted(_VALID_LEVELS))}"
            )
        return level

    @property
    def logger_name(self) -> str:
        """Return the dotted logger name for this configuration."""
        return f"{self.app_name}.{self.module_name}"


__all__: list[str] = ["ModelVaultLoggerConfig"]
