# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for vault_provider tests.

The secret store is replaced by a MagicMock standing in for
ProtocolSecretStoreClient. ``store_client_factory`` always returns the same
mock, so side effects queued on it carry across re-authentication.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pydantic import SecretStr

from vault_provider.enums import EnumVaultAuthType
from vault_provider.models import ModelVaultProviderConfig

SECRET_PATH = "secretPath"
ENTITY_ID = "entityId"


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Mark every test collected under tests/unit with ``unit``."""
    unit_marker = pytest.mark.unit
    for item in items:
        if "tests/unit" in item.path.as_posix():
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)


@pytest.fixture
def token_config() -> ModelVaultProviderConfig:
    """Provide a token-mode configuration."""
    return ModelVaultProviderConfig(
        vault_addr="https://vault.example.com:8200",
        vault_secret_path=SECRET_PATH,
        vault_auth_type=EnumVaultAuthType.TOKEN,
        vault_token=SecretStr("s.test1234567890"),
    )


@pytest.fixture
def userpass_config() -> ModelVaultProviderConfig:
    """Provide a userpass-mode configuration."""
    return ModelVaultProviderConfig(
        vault_addr="https://vault.example.com:8200",
        vault_secret_path=SECRET_PATH,
        vault_auth_type=EnumVaultAuthType.USERPASS,
        vault_user="user",
        vault_password=SecretStr("password"),
    )


@pytest.fixture
def mock_store_client() -> MagicMock:
    """Provide a mocked secret store handle."""
    client = MagicMock()
    client.login.return_value = "s.session-token"
    client.write.return_value = {"data": {"version": 1}}
    client.read.return_value = {"data": {"data": {"value": "secret"}}}
    client.delete.return_value = True
    return client


@pytest.fixture
def store_client_factory(mock_store_client: MagicMock) -> MagicMock:
    """Provide a client factory that always returns ``mock_store_client``."""
    return MagicMock(return_value=mock_store_client)
