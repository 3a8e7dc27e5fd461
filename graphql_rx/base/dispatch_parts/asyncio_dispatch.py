"""Event-loop dispatch: handlers run on an asyncio loop thread."""
from __future__ import annotations

import asyncio
from typing import Callable, Optional


class AsyncioDispatch:
    """Schedule handlers with ``loop.call_soon_threadsafe``.

    When no loop is given, the running loop at construction time is used.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def dispatch(self, fn: Callable[[], None]) -> None:
        self._loop.call_soon_threadsafe(fn)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"AsyncioDispatch({self._loop!r})"


__all__ = ["AsyncioDispatch"]
