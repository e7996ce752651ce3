# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
# mypy: disable-error-code="index, operator, arg-type"
"""Unit tests for VaultSecretAccessor.

Covers payload and path shape, the retry-once-after-reauth loop and the
mapping of store failures onto ResourceNotFoundError, AccessUnavailableError
or the original exception.
"""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import hvac.exceptions
import pytest
import requests
from pydantic import ValidationError

from vault_provider.errors import (
    AccessUnavailableError,
    ResourceNotFoundError,
    VaultAuthenticationError,
    VaultProviderError,
)
from vault_provider.handlers import VaultSecretAccessor, VaultSessionManager
from vault_provider.models import ModelVaultProviderConfig

ENTITY_PATH = "secretPath/entityId"


async def _accessor(
    config: ModelVaultProviderConfig, factory: MagicMock
) -> tuple[VaultSecretAccessor[object], VaultSessionManager]:
    session = VaultSessionManager(config, client_factory=factory)
    await session.initialize()
    return VaultSecretAccessor(config, session), session


class TestVaultSecretAccessorHappyPath:
    """Test operations that succeed on the first attempt."""

    @pytest.mark.asyncio
    async def test_write_payload_and_path(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test write sends {"data": {"value": ...}} to <prefix>/<entity>."""
        accessor, session = await _accessor(token_config, store_client_factory)

        ack = await accessor.write("entityId", {"a": 1})

        mock_store_client.write.assert_called_once_with(
            ENTITY_PATH, {"data": {"value": {"a": 1}}}
        )
        assert ack
        assert session.reauthentication_count == 0
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_read_returns_value(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test read extracts data.data.value."""
        accessor, session = await _accessor(token_config, store_client_factory)

        assert await accessor.read("entityId") == "secret"
        mock_store_client.read.assert_called_once_with(ENTITY_PATH)
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_delete(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test delete targets the entity path."""
        accessor, session = await _accessor(token_config, store_client_factory)

        assert await accessor.delete("entityId") is True
        mock_store_client.delete.assert_called_once_with(ENTITY_PATH)
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_read_malformed_payload(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test a response without data.data.value is reported."""
        mock_store_client.read.return_value = {"data": {"metadata": {}}}
        accessor, session = await _accessor(token_config, store_client_factory)

        with pytest.raises(VaultProviderError, match="malformed"):
            await accessor.read("entityId")
        await session.shutdown()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", ["write", "read", "delete"])
    @pytest.mark.parametrize(
        "entity_id",
        ["../other", "a/b", "..", ".", ""],
        ids=["traversal", "slash", "parent", "current", "empty"],
    )
    async def test_invalid_entity_id_rejected(
        self,
        operation: str,
        entity_id: str,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test ids that are not a single plain path segment never reach the store."""
        accessor, session = await _accessor(token_config, store_client_factory)

        with pytest.raises(VaultProviderError, match="Invalid entity id") as exc_info:
            if operation == "write":
                await accessor.write(entity_id, "value")
            else:
                await getattr(accessor, operation)(entity_id)

        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.extra_context["entity_id"] == entity_id
        getattr(mock_store_client, operation).assert_not_called()
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_operation_before_initialize(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test operations fail without an established session."""
        session = VaultSessionManager(token_config, client_factory=store_client_factory)
        accessor: VaultSecretAccessor[object] = VaultSecretAccessor(
            token_config, session
        )

        with pytest.raises(VaultProviderError, match="not initialized"):
            await accessor.write("entityId", "value")
        mock_store_client.write.assert_not_called()


class TestVaultSecretAccessorReauth:
    """Test the retry-once-after-reauth loop."""

    @pytest.mark.asyncio
    async def test_permission_denied_then_success(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test one denial triggers one re-authentication and a retry."""
        mock_store_client.write.side_effect = [
            hvac.exceptions.Forbidden("permission denied"),
            {"data": {"version": 1}},
        ]
        accessor, session = await _accessor(token_config, store_client_factory)

        ack = await accessor.write("entityId", "value")

        assert ack == {"data": {"version": 1}}
        assert mock_store_client.write.call_count == 2
        assert session.reauthentication_count == 1
        assert store_client_factory.call_count == 2
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_permission_denied_by_message(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test a generic error whose text reports a denial is retried."""
        mock_store_client.read.side_effect = [
            RuntimeError("1 error occurred: permission denied"),
            {"data": {"data": {"value": 7}}},
        ]
        accessor, session = await _accessor(token_config, store_client_factory)

        assert await accessor.read("entityId") == 7
        assert session.reauthentication_count == 1
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_second_denial_surfaces_original_error(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test a denial on the retry is re-raised without another retry."""
        first = hvac.exceptions.Forbidden("permission denied")
        second = hvac.exceptions.Forbidden("permission denied")
        mock_store_client.write.side_effect = [first, second]
        accessor, session = await _accessor(token_config, store_client_factory)

        with pytest.raises(hvac.exceptions.Forbidden) as exc_info:
            await accessor.write("entityId", "value")

        assert exc_info.value is second
        assert mock_store_client.write.call_count == 2
        assert session.reauthentication_count == 1
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_reauthentication_failure_propagates(
        self,
        userpass_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test a failed re-login surfaces as VaultAuthenticationError."""
        mock_store_client.login.side_effect = [
            "s.session-token",
            hvac.exceptions.InvalidRequest("invalid username or password"),
        ]
        mock_store_client.delete.side_effect = hvac.exceptions.Forbidden(
            "permission denied"
        )
        accessor, session = await _accessor(userpass_config, store_client_factory)

        with pytest.raises(VaultAuthenticationError):
            await accessor.delete("entityId")

        assert mock_store_client.delete.call_count == 1
        assert session.is_established is False
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_retry_budget_is_per_operation(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test each operation gets its own re-authentication."""
        mock_store_client.read.side_effect = [
            hvac.exceptions.Forbidden("permission denied"),
            {"data": {"data": {"value": "a"}}},
            hvac.exceptions.Forbidden("permission denied"),
            {"data": {"data": {"value": "b"}}},
        ]
        accessor, session = await _accessor(token_config, store_client_factory)

        assert await accessor.read("entityId") == "a"
        assert await accessor.read("entityId") == "b"
        assert session.reauthentication_count == 2
        await session.shutdown()


class TestVaultSecretAccessorErrorMapping:
    """Test how non-retryable store failures surface."""

    @pytest.mark.asyncio
    async def test_not_found(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test a 404 becomes ResourceNotFoundError carrying the entity id."""
        cause = hvac.exceptions.InvalidPath("Status 404", url=ENTITY_PATH)
        mock_store_client.read.side_effect = cause
        accessor, session = await _accessor(token_config, store_client_factory)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await accessor.read("entityId")

        assert exc_info.value.entity_id == "entityId"
        assert exc_info.value.message == "Resource not found: entityId"
        assert exc_info.value.__cause__ is cause
        assert session.reauthentication_count == 0
        await session.shutdown()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", ["write", "read", "delete"])
    @pytest.mark.parametrize(
        "failure",
        [
            ConnectionRefusedError("connection refused"),
            TimeoutError(),
            requests.exceptions.ConnectionError("connection reset"),
            hvac.exceptions.VaultDown("Vault is sealed"),
        ],
        ids=["refused", "timeout", "requests", "sealed"],
    )
    async def test_unavailable(
        self,
        operation: str,
        failure: Exception,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test transport failures become AccessUnavailableError."""
        getattr(mock_store_client, operation).side_effect = failure
        accessor, session = await _accessor(token_config, store_client_factory)

        with pytest.raises(AccessUnavailableError) as exc_info:
            if operation == "write":
                await accessor.write("entityId", "value")
            else:
                await getattr(accessor, operation)("entityId")

        assert exc_info.value.status == 503
        # asyncio re-creates TimeoutError when copying it out of the worker
        assert isinstance(exc_info.value.__cause__, type(failure))
        assert exc_info.value.__cause__.args == failure.args
        assert session.reauthentication_count == 0
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_slow_store_call_times_out(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test a store call exceeding timeout_seconds becomes unavailable."""
        config = token_config.model_copy(update={"timeout_seconds": 1.0})
        release = threading.Event()

        def hang(path: str) -> dict[str, object]:
            release.wait(timeout=5.0)
            return {"data": {"data": {"value": "late"}}}

        mock_store_client.read.side_effect = hang
        accessor, session = await _accessor(config, store_client_factory)

        try:
            with pytest.raises(AccessUnavailableError) as exc_info:
                await accessor.read("entityId")
        finally:
            release.set()

        assert isinstance(exc_info.value.__cause__, TimeoutError)
        assert session.reauthentication_count == 0
        await session.shutdown()

    @pytest.mark.asyncio
    async def test_other_errors_reraised_unchanged(
        self,
        token_config: ModelVaultProviderConfig,
        store_client_factory: MagicMock,
        mock_store_client: MagicMock,
    ) -> None:
        """Test unclassified errors propagate as the original exception."""
        failure = hvac.exceptions.InternalServerError("internal error")
        mock_store_client.write.side_effect = failure
        accessor, session = await _accessor(token_config, store_client_factory)

        with pytest.raises(hvac.exceptions.InternalServerError) as exc_info:
            await accessor.write("entityId", "value")

        assert exc_info.value is failure
        assert mock_store_client.write.call_count == 1
        assert session.reauthentication_count == 0
        await session.shutdown()
