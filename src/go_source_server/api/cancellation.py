from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Coroutine
from typing import Any, TypeVar

from starlette.requests import Request

from go_source_server.core.errors import OperationCancelledError

T = TypeVar("T")

_POLL_INTERVAL = 0.5


async def run_until_disconnected(
    request: Request,
    work: Coroutine[Any, Any, T],
    poll_interval: float = _POLL_INTERVAL,
) -> T:
    """Await *work*, cancelling it if the client goes away first."""
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                raise OperationCancelledError("client disconnected")
    finally:
        if not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
