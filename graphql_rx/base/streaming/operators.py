"""Stream operators composed on top of the bridge.

The bridge has no notion of time or of "enough values"; these operators add
both and propagate their decision upstream by disposing, which in turn
cancels the client operation.
"""
from __future__ import annotations

import threading
from typing import Optional, TypeVar

from ..errors import BridgeTimeoutError, UnknownFailure
from ..logging import get_logger, log_event
from .disposable import Disposable
from .observable import Observable, ObservableSubscription
from .single import Single, SingleSubscription

T = TypeVar("T")

_logger = get_logger("graphql_rx.operators")


def timeout_single(source: Single[T], seconds: Optional[float] = None) -> Single[T]:
    """Fail with :class:`BridgeTimeoutError` unless ``source`` resolves in time.

    ``seconds=None`` reads ``timeout_seconds`` from the bridge configuration.
    The timer runs on a daemon ``threading.Timer``; when it fires, the
    timeout error is delivered from that thread.
    """
    if seconds is None:
        from ...config import get_bridge_config

        seconds = get_bridge_config().timeout_seconds
    if seconds <= 0:
        raise ValueError("timeout seconds must be positive")
    limit = float(seconds)

    def subscribe(sink: SingleSubscription[T]) -> Disposable:
        def expire() -> None:
            if sink.error(BridgeTimeoutError(limit)):
                log_event(_logger, "operator.timeout", seconds=limit)

        timer = threading.Timer(limit, expire)
        timer.daemon = True
        upstream = source.subscribe(sink.success, sink.error)

        def release() -> None:
            timer.cancel()
            upstream.dispose()

        if not sink.terminated:
            timer.start()
        return Disposable(release)

    return Single(subscribe)


def take(source: Observable[T], count: int) -> Observable[T]:
    """Forward at most ``count`` values then complete.

    ``count <= 0`` completes without subscribing to ``source``.
    """

    def subscribe(sink: ObservableSubscription[T]) -> Disposable:
        if count <= 0:
            sink.completed()
            return Disposable()
        remaining = count

        def on_next(value: T) -> None:
            nonlocal remaining
            if remaining <= 0:
                return
            remaining -= 1
            sink.next(value)
            if remaining == 0:
                sink.completed()

        return source.subscribe(on_next, sink.error, sink.completed)

    return Observable(subscribe)


def first(source: Observable[T]) -> Single[T]:
    """Resolve with the first value of ``source``.

    A source that completes before emitting fails with :class:`UnknownFailure`.
    """

    def subscribe(sink: SingleSubscription[T]) -> Disposable:
        def on_completed() -> None:
            sink.error(UnknownFailure("sequence completed without a value"))

        return take(source, 1).subscribe(sink.success, sink.error, on_completed)

    return Single(subscribe)


__all__ = ["timeout_single", "take", "first"]
