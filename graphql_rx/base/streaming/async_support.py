"""asyncio consumption adapters for bridged streams.

Values may arrive on any thread (depending on the dispatch context); they are
handed to the consuming loop with ``call_soon_threadsafe`` and queued there.
The queue belongs to the consumer side; the bridge itself still delivers
synchronously.
"""
from __future__ import annotations

import asyncio
from typing import Any, Generic, Optional, Tuple, TypeVar

from .disposable import Disposable
from .observable import Observable

T = TypeVar("T")

_NEXT = "next"
_ERROR = "error"
_COMPLETED = "completed"


class ObservableAsyncIterator(Generic[T]):
    """``async for`` over an :class:`Observable`.

    Subscribes lazily on the first ``__anext__``. Leaving the loop early
    (``break``, exception, task cancellation) should be followed by
    ``aclose()``; ``async with`` does that automatically.
    """

    def __init__(self, source: Observable[T]) -> None:
        self._source = source
        self._queue: Optional["asyncio.Queue[Tuple[str, Any]]"] = None
        self._subscription: Optional[Disposable] = None
        self._finished = False

    def __aiter__(self) -> "ObservableAsyncIterator[T]":
        return self

    async def __aenter__(self) -> "ObservableAsyncIterator[T]":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _start(self) -> None:
        loop = asyncio.get_running_loop()
        queue: "asyncio.Queue[Tuple[str, Any]]" = asyncio.Queue()
        self._queue = queue

        def put(kind: str, payload: Any = None) -> None:
            try:
                loop.call_soon_threadsafe(queue.put_nowait, (kind, payload))
            except RuntimeError:
                # consuming loop is closed; nobody can read further events
                self._abandon()

        self._subscription = self._source.subscribe(
            lambda value: put(_NEXT, value),
            lambda exc: put(_ERROR, exc),
            lambda: put(_COMPLETED),
        )
        if self._finished:
            self._subscription.dispose()

    def _abandon(self) -> None:
        self._finished = True
        if self._subscription is not None:
            self._subscription.dispose()

    async def __anext__(self) -> T:
        if self._finished:
            raise StopAsyncIteration
        if self._queue is None:
            self._start()
        assert self._queue is not None  # nosec B101 - set by _start
        try:
            kind, payload = await self._queue.get()
        except asyncio.CancelledError:
            await self.aclose()
            raise
        if kind == _NEXT:
            return payload
        self._finished = True
        if kind == _ERROR:
            raise payload
        raise StopAsyncIteration

    async def aclose(self) -> None:
        """Dispose the subscription; further iteration stops."""
        self._finished = True
        if self._subscription is not None:
            self._subscription.dispose()


__all__ = ["ObservableAsyncIterator"]
