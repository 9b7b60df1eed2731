"""Abandon long running request work once the HTTP client goes away."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Awaitable, TypeVar

from fastapi import HTTPException
from starlette.requests import Request

LOGGER = logging.getLogger(__name__)

CLIENT_CLOSED_REQUEST = 499

T = TypeVar("T")


async def cancel_on_disconnect(
    request: Request,
    awaitable: Awaitable[T],
    *,
    poll_interval: float = 0.5,
) -> T:
    """Await ``awaitable``, cancelling it if the client disconnects first."""

    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                LOGGER.info("Client disconnected from %s; cancelling", request.url.path)
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
                raise HTTPException(status_code=CLIENT_CLOSED_REQUEST, detail="Client closed request")
    finally:
        if not task.done():
            task.cancel()
