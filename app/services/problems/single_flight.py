"""Collapse concurrent loads of the same key into one call."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger


class SingleFlight:
    """Callers sharing a key while a call is running await that same call."""

    def __init__(self):
        self._calls: dict[str, asyncio.Future] = {}

    def __len__(self) -> int:
        return len(self._calls)

    async def do(self, key: str, fn: Callable[[], Awaitable[Any]]) -> Any:
        """Run fn for key, or join the call already in flight for it."""
        call = self._calls.get(key)
        if call is not None:
            logger.debug("Joining in-flight load: {}", key)
            return await asyncio.shield(call)

        call = asyncio.ensure_future(fn())
        self._calls[key] = call
        call.add_done_callback(lambda _: self._forget(key, call))
        return await asyncio.shield(call)

    def _forget(self, key: str, call: asyncio.Future) -> None:
        if self._calls.get(key) is call:
            del self._calls[key]
