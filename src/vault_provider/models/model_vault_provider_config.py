# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Configuration Model.

This module provides the Pydantic configuration model for the vault provider
and the helpers that build it from raw mappings or environment variables.

Security Note:
    The password and token fields use SecretStr to prevent accidental logging
    of credentials. Credentials should come from environment variables, never
    from configuration files committed to source control.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
    model_validator,
)

from vault_provider.enums import EnumVaultAuthType
from vault_provider.errors import ModelVaultErrorContext, RequiredVaultOptionsMissing

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class ModelVaultProviderConfig(BaseModel):
    """Configuration for the vault provider.

    Security Policy:
        - vault_password and vault_token use SecretStr
        - describe() and log lines expose the address and auth type only
        - Use verify_ssl=True in production environments

    Attributes:
        vault_addr: Vault server URL (e.g., "https://vault.example.com:8200")
        vault_secret_path: Path prefix under which each entity gets one secret
        vault_auth_type: Session authentication mode (token, userpass, ldap)
        vault_user: Login principal for userpass/ldap modes
        vault_password: Login credential for userpass/ldap modes
        vault_token: Static token for token mode (falls back to vault_password,
            then to hvac's own VAULT_TOKEN lookup)
        namespace: Vault namespace for Vault Enterprise (optional)
        verify_ssl: Whether to verify SSL certificates (default True)
        timeout_seconds: Per round-trip timeout in seconds (1.0-300.0)
        auth_mount_point: Override for the login mount point
        max_concurrent_operations: Thread pool size for blocking hvac calls

    Example:
        >>> config = ModelVaultProviderConfig(
        ...     vault_addr="https://vault.example.com:8200",
        ...     vault_secret_path="secret/data/tenants",
        ...     vault_auth_type="ldap",
        ...     vault_user="svc-tenants",
        ...     vault_password=SecretStr("hunter2"),
        ... )
        >>> config.mount_point
        'ldap'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    vault_addr: str = Field(
        min_length=1,
        validation_alias=AliasChoices("vault_addr", "vaultAddr"),
        description="Vault server URL",
    )
    vault_secret_path: str = Field(
        min_length=1,
        validation_alias=AliasChoices("vault_secret_path", "vaultSecretPath"),
        description="Secret path prefix; each entity lives at <prefix>/<entity_id>",
    )
    vault_auth_type: EnumVaultAuthType = Field(
        default=EnumVaultAuthType.TOKEN,
        validation_alias=AliasChoices("vault_auth_type", "vaultAuthType"),
        description="Session authentication mode",
    )
    vault_user: str | None = Field(
        default=None,
        validation_alias=AliasChoices("vault_user", "vaultUser"),
        description="Login principal for userpass/ldap modes",
    )
    vault_password: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("vault_password", "vaultPassword"),
        description="Login credential for userpass/ldap modes",
    )
    vault_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("vault_token", "vaultToken"),
        description="Static token for token mode",
    )
    namespace: str | None = Field(
        default=None,
        description="Vault namespace for Vault Enterprise",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify SSL certificates",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Per round-trip timeout in seconds",
    )
    auth_mount_point: str | None = Field(
        default=None,
        description="Login mount point override (defaults to the auth type name)",
    )
    max_concurrent_operations: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum concurrent store calls (thread pool size)",
    )

    @field_validator("vault_auth_type", mode="before")
    @classmethod
    def parse_auth_type(cls, value: object) -> EnumVaultAuthType:
        """Accept enum members, values and aliases such as 'password'."""
        if isinstance(value, EnumVaultAuthType):
            return value
        return EnumVaultAuthType.parse(str(value))

    @field_validator("vault_secret_path")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the prefix so paths join with exactly one slash."""
        stripped = value.rstrip("/")
        if not stripped:
            raise ValueError("vault_secret_path cannot be only slashes")
        return stripped

    @model_validator(mode="after")
    def validate_login_credentials(self) -> ModelVaultProviderConfig:
        """Ensure login-based modes carry a principal and a credential."""
        if self.vault_auth_type.requires_login:
            missing = [
                name
                for name, present in (
                    ("vault_user", bool(self.vault_user)),
                    ("vault_password", self.vault_password is not None),
                )
                if not present
            ]
            if missing:
                raise ValueError(
                    f"auth type '{self.vault_auth_type.value}' requires "
                    f"{', '.join(missing)}"
                )
        return self

    @property
    def token(self) -> SecretStr | None:
        """Return the token embedded in the handle for token mode."""
        if self.vault_auth_type.requires_login:
            return None
        return self.vault_token or self.vault_password

    @property
    def mount_point(self) -> str:
        """Return the auth mount point used for the login exchange."""
        return self.auth_mount_point or self.vault_auth_type.default_mount_point

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None
    ) -> ModelVaultProviderConfig:
        """Create the configuration from ``VAULT_*`` environment variables.

        Reads VAULT_ADDR, VAULT_SECRET_PATH, VAULT_AUTH_TYPE (default token),
        VAULT_USER, VAULT_PASSWORD, VAULT_TOKEN, VAULT_NAMESPACE,
        VAULT_SKIP_VERIFY and VAULT_TIMEOUT_SECONDS.

        Raises:
            RequiredVaultOptionsMissing: If required variables are absent or
                the resulting configuration does not validate.
        """
        env = os.environ if environ is None else environ

        missing = [
            name for name in ("VAULT_ADDR", "VAULT_SECRET_PATH") if not env.get(name)
        ]
        auth_type = EnumVaultAuthType.parse(env.get("VAULT_AUTH_TYPE", "token"))
        if auth_type.requires_login:
            missing.extend(
                name for name in ("VAULT_USER", "VAULT_PASSWORD") if not env.get(name)
            )
        if missing:
            raise RequiredVaultOptionsMissing(
                missing,
                context=ModelVaultErrorContext.with_correlation(
                    operation="load_config_from_env"
                ),
            )

        raw: dict[str, object] = {
            "vault_addr": env["VAULT_ADDR"],
            "vault_secret_path": env["VAULT_SECRET_PATH"],
            "vault_auth_type": auth_type,
            "vault_user": env.get("VAULT_USER"),
            "vault_password": env.get("VAULT_PASSWORD"),
            "vault_token": env.get("VAULT_TOKEN"),
            "namespace": env.get("VAULT_NAMESPACE"),
            "verify_ssl": env.get("VAULT_SKIP_VERIFY", "").lower() not in _TRUE_VALUES,
        }
        if env.get("VAULT_TIMEOUT_SECONDS"):
            raw["timeout_seconds"] = env["VAULT_TIMEOUT_SECONDS"]
        return parse_vault_config(raw)


def parse_vault_config(raw: Mapping[str, object]) -> ModelVaultProviderConfig:
    """Validate a raw configuration mapping.

    Args:
        raw: Configuration dict using snake_case or the legacy camelCase keys
            (vaultAddr, vaultSecretPath, vaultAuthType, vaultUser, vaultPassword)

    Returns:
        Validated ModelVaultProviderConfig

    Raises:
        RequiredVaultOptionsMissing: If Pydantic validation fails. The names of
            the offending options are listed in ``missing_options``.
    """
    try:
        return ModelVaultProviderConfig.model_validate(dict(raw))
    except ValidationError as e:
        offending: list[str] = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            offending.append(location or "config")
        raise RequiredVaultOptionsMissing(
            offending,
            context=ModelVaultErrorContext.with_correlation(operation="parse_config"),
            cause=e,
        ) from e


__all__: list[str] = ["ModelVaultProviderConfig", "parse_vault_config"]
