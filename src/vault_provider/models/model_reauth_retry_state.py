# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Re-authentication Retry State Model.

Immutable attempt counter carried as local state by the secret accessor's
bounded retry loop. Each transition returns a new instance.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelReauthRetryState(BaseModel):
    """Attempt bookkeeping for one logical store operation.

    Attributes:
        attempt: Number of re-authentications already performed
        max_reauth_attempts: Upper bound on re-authentications (default 1)
        last_error: Sanitized message of the failure that caused the last retry
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    attempt: int = Field(default=0, ge=0)
    max_reauth_attempts: int = Field(default=1, ge=0)
    last_error: str | None = None

    def can_reauthenticate(self) -> bool:
        """Return True if another re-authenticate-and-retry cycle is allowed."""
        return self.attempt < self.max_reauth_attempts

    def next_attempt(self, error_message: str) -> ModelReauthRetryState:
        """Return the state after one more re-authentication."""
        return self.model_copy(
            update={"attempt": self.attempt + 1, "last_error": error_message}
        )


__all__: list[str] = ["ModelReauthRetryState"]
