"""One-shot stream: resolves with one value, fails with one error, or never.

``Single`` is cold. Each ``subscribe`` call runs the subscribe function
with a fresh :class:`SingleSubscription`, which enforces the one-terminal-event
rule and disposes itself (releasing upstream) right after that event.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from contextlib import suppress
from typing import Any, Callable, Generator, Generic, Optional, TypeVar

from ..logging import get_logger, log_event
from .disposable import Disposable

T = TypeVar("T")
U = TypeVar("U")

SuccessHandler = Callable[[T], None]
ErrorHandler = Callable[[BaseException], None]

_logger = get_logger("graphql_rx.streaming")


class SingleSubscription(Disposable, Generic[T]):
    """Sink handed to a ``Single`` subscribe function.

    ``success``/``error`` return ``True`` when the event was delivered and
    ``False`` when it was dropped (already terminated or disposed).
    """

    def __init__(self, on_success: Optional[SuccessHandler] = None, on_error: Optional[ErrorHandler] = None) -> None:
        super().__init__()
        self._on_success = on_success
        self._on_error = on_error
        self._terminated = False

    @property
    def terminated(self) -> bool:
        return self._terminated

    def _claim(self) -> bool:
        with self._lock:
            if self._terminated or self._disposed:
                return False
            self._terminated = True
            return True

    def success(self, value: T) -> bool:
        if not self._claim():
            return False
        try:
            if self._on_success is not None:
                self._on_success(value)
        finally:
            self.dispose()
        return True

    def error(self, exc: BaseException) -> bool:
        if not self._claim():
            return False
        try:
            if self._on_error is not None:
                self._on_error(exc)
            else:
                log_event(
                    _logger,
                    "stream.unhandled_error",
                    level=logging.ERROR,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
        finally:
            self.dispose()
        return True


SingleSubscribeFn = Callable[[SingleSubscription[T]], Disposable]


class Single(Generic[T]):
    """Cold one-shot stream built from a subscribe function.

    The subscribe function registers work, delivers through the sink, and
    returns a ``Disposable`` that stops the work.
    """

    def __init__(self, subscribe_fn: SingleSubscribeFn) -> None:
        self._subscribe_fn = subscribe_fn

    def subscribe(
        self,
        on_success: Optional[SuccessHandler] = None,
        on_error: Optional[ErrorHandler] = None,
    ) -> Disposable:
        """Start the operation; returns the handle that cancels it."""
        subscription: SingleSubscription[T] = SingleSubscription(on_success, on_error)
        try:
            upstream = self._subscribe_fn(subscription)
        except Exception as exc:
            if subscription.disposed:
                # a consumer callback raised while the stream was starting
                raise
            subscription.error(exc)
            return subscription
        subscription.set_action(upstream.dispose)
        return subscription

    # Operators -----------------------------------------------------------
    def map(self, fn: Callable[[T], U]) -> "Single[U]":
        """Transform the success value; exceptions from ``fn`` fail the stream."""

        def subscribe(sink: SingleSubscription[U]) -> Disposable:
            def on_success(value: T) -> None:
                try:
                    mapped = fn(value)
                except Exception as exc:
                    sink.error(exc)
                    return
                sink.success(mapped)

            return self.subscribe(on_success, sink.error)

        return Single(subscribe)

    def timeout(self, seconds: Optional[float] = None) -> "Single[T]":
        """Fail with ``BridgeTimeoutError`` and dispose upstream after ``seconds``."""
        from .operators import timeout_single

        return timeout_single(self, seconds)

    # Consumption helpers ---------------------------------------------------
    def to_future(self) -> "concurrent.futures.Future[T]":
        """Subscribe and expose the outcome as a ``concurrent.futures.Future``.

        Cancelling the future disposes the subscription.
        """
        future: "concurrent.futures.Future[T]" = concurrent.futures.Future()

        def on_success(value: T) -> None:
            with suppress(concurrent.futures.InvalidStateError):
                future.set_result(value)

        def on_error(exc: BaseException) -> None:
            with suppress(concurrent.futures.InvalidStateError):
                future.set_exception(exc)

        subscription = self.subscribe(on_success, on_error)

        def on_done(f: "concurrent.futures.Future[T]") -> None:
            if f.cancelled():
                subscription.dispose()

        future.add_done_callback(on_done)
        return future

    def result(self, timeout: Optional[float] = None) -> T:
        """Block until the stream resolves; raise its error on failure.

        On ``concurrent.futures.TimeoutError`` the subscription is disposed.
        """
        future = self.to_future()
        try:
            return future.result(timeout)
        except concurrent.futures.TimeoutError:
            future.cancel()
            raise

    def __await__(self) -> Generator[Any, None, T]:
        """Await the outcome; cancelling the awaiting task disposes upstream."""
        return asyncio.wrap_future(self.to_future()).__await__()


__all__ = ["Single", "SingleSubscription", "SingleSubscribeFn"]
