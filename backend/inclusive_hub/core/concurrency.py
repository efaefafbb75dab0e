"""Concurrency helpers for running blocking upstream calls off the event loop."""

from __future__ import annotations

from typing import Any, Callable

import anyio

from inclusive_hub.core.config import settings

_upstream_sem = anyio.Semaphore(settings.UPSTREAM_MAX_CONCURRENCY)


async def run_upstream_call(func: Callable[..., Any], *args: Any) -> Any:
    """Run a sync callable in a worker thread with bounded concurrency."""

    async with _upstream_sem:
        return await anyio.to_thread.run_sync(func, *args)
