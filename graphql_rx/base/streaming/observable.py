"""Multi-value stream: zero or more values, then optionally one terminal event.

``Observable`` is cold. Each ``subscribe`` call gets its own
:class:`ObservableSubscription`; no event is delivered after a terminal event
or after disposal, and a terminal event disposes the subscription.
"""
from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, TypeVar

from ..logging import get_logger, log_event
from .disposable import Disposable

T = TypeVar("T")
U = TypeVar("U")

NextHandler = Callable[[T], None]
ErrorHandler = Callable[[BaseException], None]
CompletedHandler = Callable[[], None]

_logger = get_logger("graphql_rx.streaming")


class ObservableSubscription(Disposable, Generic[T]):
    """Sink handed to an ``Observable`` subscribe function."""

    def __init__(
        self,
        on_next: Optional[NextHandler] = None,
        on_error: Optional[ErrorHandler] = None,
        on_completed: Optional[CompletedHandler] = None,
    ) -> None:
        super().__init__()
        self._on_next = on_next
        self._on_error = on_error
        self._on_completed = on_completed
        self._terminated = False

    @property
    def terminated(self) -> bool:
        return self._terminated

    @property
    def active(self) -> bool:
        """Whether values are still being accepted."""
        return not (self._terminated or self._disposed)

    def _claim(self) -> bool:
        with self._lock:
            if self._terminated or self._disposed:
                return False
            self._terminated = True
            return True

    def next(self, value: T) -> bool:
        """Deliver one value; a consumer that raises ends the subscription.

        Delivery is checked under the lock but runs outside it, so a value
        already past the check when ``dispose`` runs on another thread may
        still arrive. Nothing is delivered after that in-flight call.
        """
        with self._lock:
            if self._terminated or self._disposed:
                return False
        if self._on_next is not None:
            try:
                self._on_next(value)
            except Exception:
                self.dispose()
                raise
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

    def completed(self) -> bool:
        if not self._claim():
            return False
        try:
            if self._on_completed is not None:
                self._on_completed()
        finally:
            self.dispose()
        return True


ObservableSubscribeFn = Callable[[ObservableSubscription[T]], Disposable]


class Observable(Generic[T]):
    """Cold multi-value stream built from a subscribe function."""

    def __init__(self, subscribe_fn: ObservableSubscribeFn) -> None:
        self._subscribe_fn = subscribe_fn

    def subscribe(
        self,
        on_next: Optional[NextHandler] = None,
        on_error: Optional[ErrorHandler] = None,
        on_completed: Optional[CompletedHandler] = None,
    ) -> Disposable:
        """Start emitting; the returned handle stops the stream."""
        subscription: ObservableSubscription[T] = ObservableSubscription(on_next, on_error, on_completed)
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
    def map(self, fn: Callable[[T], U]) -> "Observable[U]":
        """Transform each value; an exception from ``fn`` fails the stream."""

        def subscribe(sink: ObservableSubscription[U]) -> Disposable:
            def on_next(value: T) -> None:
                try:
                    mapped = fn(value)
                except Exception as exc:
                    sink.error(exc)
                    return
                sink.next(mapped)

            return self.subscribe(on_next, sink.error, sink.completed)

        return Observable(subscribe)

    def take(self, count: int) -> "Observable[T]":
        """Forward the first ``count`` values, then complete and dispose upstream."""
        from .operators import take

        return take(self, count)

    def first(self):
        """First value as a ``Single``; completion without a value fails."""
        from .operators import first

        return first(self)

    def __aiter__(self):
        """Iterate values with ``async for``; leaving the loop disposes upstream."""
        from .async_support import ObservableAsyncIterator

        return ObservableAsyncIterator(self)


__all__ = ["Observable", "ObservableSubscription", "ObservableSubscribeFn"]
