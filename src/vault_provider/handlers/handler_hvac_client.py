# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""hvac-backed secret store client handle.

Wraps ``hvac.Client`` behind ProtocolSecretStoreClient. All methods are
blocking and raise hvac/requests exceptions unchanged.

Security Features:
    - Token comes from SecretStr config and is only unwrapped when building
      the hvac client
    - SSL verification enabled by default
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import hvac
import hvac.exceptions

from vault_provider.enums import EnumVaultAuthType
from vault_provider.models import ModelVaultProviderConfig

logger = logging.getLogger(__name__)


class HvacSecretStoreClient:
    """ProtocolSecretStoreClient implementation over ``hvac.Client``.

    Paths are passed to hvac verbatim, so for a KV v2 mount the configured
    secret path prefix must include the ``data/`` segment
    (e.g. ``secret/data/tenants``).
    """

    def __init__(self, client: hvac.Client) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: ModelVaultProviderConfig) -> HvacSecretStoreClient:
        """Create a handle for ``config``.

        In token mode the token is embedded in the handle here and no network
        call is made. For login modes the handle starts without a token until
        ``login`` installs one.
        """
        token = config.token.get_secret_value() if config.token else None
        client = hvac.Client(
            url=config.vault_addr,
            token=token,
            namespace=config.namespace,
            verify=config.verify_ssl,
            timeout=config.timeout_seconds,
        )
        return cls(client)

    def login(
        self,
        auth_type: EnumVaultAuthType,
        username: str,
        password: str,
        mount_point: str | None = None,
    ) -> str:
        """Log in with a userpass or LDAP grant and install the client token."""
        mount = mount_point or auth_type.default_mount_point
        if auth_type is EnumVaultAuthType.LDAP:
            response = self._client.auth.ldap.login(
                username=username,
                password=password,
                mount_point=mount,
                use_token=True,
            )
        elif auth_type is EnumVaultAuthType.USERPASS:
            response = self._client.auth.userpass.login(
                username=username,
                password=password,
                mount_point=mount,
                use_token=True,
            )
        else:
            raise ValueError(f"Auth type '{auth_type.value}' has no login exchange")

        auth = response.get("auth") if isinstance(response, Mapping) else None
        client_token = auth.get("client_token") if isinstance(auth, Mapping) else None
        if not isinstance(client_token, str) or not client_token:
            raise hvac.exceptions.InvalidRequest(
                "Login response did not contain a client token"
            )
        self._client.token = client_token
        logger.debug(
            "Vault login exchange completed",
            extra={"auth_type": auth_type.value, "mount_point": mount},
        )
        return client_token

    def write(self, path: str, payload: Mapping[str, object]) -> object:
        response = self._client.write_data(path, data=dict(payload))
        return response if response is not None else True

    def read(self, path: str) -> Mapping[str, object]:
        response = self._client.read(path)
        if response is None:
            # hvac.Client.read swallows 404 and returns None
            raise hvac.exceptions.InvalidPath("Status 404", url=path)
        return response

    def delete(self, path: str) -> object:
        response = self._client.delete(path)
        return response if response is not None else True


__all__: list[str] = ["HvacSecretStoreClient"]
