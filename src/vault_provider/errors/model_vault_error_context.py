# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Error Context Configuration Model.

Bundles the structured fields attached to every vault provider error so that
error constructors keep a short parameter list.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelVaultErrorContext(BaseModel):
    """Structured context for vault provider errors.

    Attributes:
        operation: Operation being performed (initialize, read, write, delete)
        target_name: Target store address or component name
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelVaultErrorContext(
        ...     operation="read",
        ...     target_name="https://vault.example.com:8200",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise AccessUnavailableError(context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (initialize, read, write, delete)",
    )
    target_name: str | None = Field(
        default=None,
        description="Target store address or component name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Request correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: str | None,
    ) -> ModelVaultErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelVaultErrorContext"]
