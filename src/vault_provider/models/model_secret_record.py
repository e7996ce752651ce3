# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret Record Model.

A secret record is an opaque value associated with an entity id. Its store
path is derived as ``<secret_path_prefix>/<entity_id>`` and it is written with
the payload ``{"data": {"value": value}}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

SecretValueT = TypeVar("SecretValueT")


class ModelSecretRecord(BaseModel, Generic[SecretValueT]):
    """Entity id and opaque secret value.

    Attributes:
        entity_id: Identifier of the owning entity; one path segment, no
            '/' and not "." or ".."
        value: Opaque JSON-serializable secret value
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entity_id: str = Field(min_length=1, pattern=r"^[^/]+$")
    value: SecretValueT | None = None

    @field_validator("entity_id")
    @classmethod
    def reject_dot_segments(cls, value: str) -> str:
        """Reject "." and "..", which the HTTP layer collapses into a parent path."""
        if value in (".", ".."):
            raise ValueError(f"entity_id cannot be the dot segment '{value}'")
        return value

    def path(self, secret_path_prefix: str) -> str:
        """Return the store path of this record under ``secret_path_prefix``."""
        return f"{secret_path_prefix.rstrip('/')}/{self.entity_id}"

    def to_payload(self) -> dict[str, dict[str, SecretValueT | None]]:
        """Return the write payload expected by the store."""
        return {"data": {"value": self.value}}

    @classmethod
    def from_response(
        cls, entity_id: str, response: Mapping[str, object] | None
    ) -> ModelSecretRecord[SecretValueT]:
        """Build a record from a store read response.

        The value lives at ``response["data"]["data"]["value"]``.

        Raises:
            ValueError: If the response does not have that shape.
        """
        outer = response.get("data") if isinstance(response, Mapping) else None
        inner = outer.get("data") if isinstance(outer, Mapping) else None
        if not isinstance(inner, Mapping) or "value" not in inner:
            raise ValueError(f"Unexpected secret payload shape for '{entity_id}'")
        return cls(entity_id=entity_id, value=inner["value"])


__all__: list[str] = ["ModelSecretRecord", "SecretValueT"]
