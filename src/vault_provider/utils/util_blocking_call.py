# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Run blocking store calls from async code."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from concurrent.futures import Executor
from typing import TypeVar

T = TypeVar("T")


async def run_blocking(
    func: Callable[[], T],
    *,
    executor: Executor | None,
    timeout_seconds: float,
) -> T:
    """Execute ``func`` in ``executor`` bounded by ``timeout_seconds``.

    hvac is synchronous, so every round trip is pushed to a worker thread to
    keep the event loop free. ``executor=None`` uses the loop's default pool.

    Raises:
        TimeoutError: If the call does not finish within ``timeout_seconds``.
            The worker thread itself is not interrupted.
    """
    loop = asyncio.get_running_loop()
    return await asyncio.wait_for(
        loop.run_in_executor(executor, func),
        timeout=timeout_seconds,
    )


__all__: list[str] = ["run_blocking"]
