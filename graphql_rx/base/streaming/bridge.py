"""Stream bridge: callback-driven client primitives exposed as streams.

Each bridged call is described by an :class:`OperationDescriptor` and turned
into a cold stream:

- ``fetch_single`` / ``perform_single``: a :class:`Single` that resolves
  with the first classified callback and then releases the client handle.
- ``watch_observable``: an :class:`Observable` that emits every successful
  callback and terminates on the first classified failure.

On subscription the client primitive is invoked with a result handler and
the returned cancel handle is wrapped in a :class:`GuardedCancel`. Disposing
the subscription (explicitly, or implicitly after a terminal event) cancels
that handle exactly once. Every handler invocation is classified and
delivered synchronously on whatever thread the dispatch context chose.
"""
from __future__ import annotations

import logging
import threading
import uuid
from typing import Any, List, Mapping, Optional

from ..cancellation import Cancellable, GuardedCancel
from ..classifier import classify_outcome
from ..dispatch import DispatchContext, ImmediateDispatch
from ..dto import OperationDescriptor, OperationKind
from ..errors import classify_exception
from ..interfaces import GraphQLClient, ResultHandler
from ..logging import LogContext, get_logger, log_event
from ..metrics import BridgeCounters
from ..models import CachePolicy, GraphQLMutation, GraphQLQuery, GraphQLResult
from .disposable import Disposable
from .observable import Observable, ObservableSubscription
from .single import Single, SingleSubscription

Data = Optional[Mapping[str, Any]]

_logger = get_logger("graphql_rx.bridge")


def _register(client: GraphQLClient, descriptor: OperationDescriptor, handler: ResultHandler) -> Cancellable:
    """Invoke the client primitive named by ``descriptor.kind``."""
    op = descriptor.operation
    if descriptor.kind is OperationKind.FETCH:
        return client.fetch(op, descriptor.cache_policy, descriptor.dispatch, handler)
    if descriptor.kind is OperationKind.WATCH:
        return client.watch(op, descriptor.cache_policy, descriptor.dispatch, handler)
    return client.perform(op, descriptor.dispatch, handler)


class _Registration:
    """Per-subscription bookkeeping: guarded handle, log context, counters."""

    def __init__(
        self,
        client: GraphQLClient,
        descriptor: OperationDescriptor,
        counters: Optional[BridgeCounters],
    ) -> None:
        self.client = client
        self.descriptor = descriptor
        self.counters = counters
        self.guard = GuardedCancel()
        self.ctx = LogContext(subscription_id=uuid.uuid4().hex[:12], **descriptor.log_fields()).bind(
            kind=descriptor.kind.value
        )

    def start(self, handler: ResultHandler) -> Disposable:
        """Register ``handler`` with the client and return the release hook.

        A client that raises instead of returning a handle is reported through
        ``handler`` as a transport error.

        A consumer callback that raises while the client delivers inline,
        before ``fetch``/``watch``/``perform`` has returned, is held back from
        the client. Once the handle is attached the registration is released
        and the consumer's exception is re-raised to the subscriber.
        """
        if self.counters is not None:
            self.counters.record_subscribe(self.descriptor.kind.value)
        log_event(_logger, "bridge.subscribe", self.ctx)
        caller = threading.get_ident()
        registering = True
        consumer_errors: List[Exception] = []

        def deliver(result: Optional[GraphQLResult], error: Optional[BaseException]) -> None:
            if not (registering and threading.get_ident() == caller):
                handler(result, error)
                return
            try:
                handler(result, error)
            except Exception as exc:
                consumer_errors.append(exc)

        try:
            handle = _register(self.client, self.descriptor, deliver)
        except Exception as exc:
            deliver(None, exc)
        else:
            self.guard.attach(handle)
        finally:
            registering = False
        if consumer_errors:
            self.release()
            log_event(
                _logger,
                "bridge.consumer_error",
                self.ctx,
                level=logging.WARNING,
                error_type=type(consumer_errors[0]).__name__,
                error=str(consumer_errors[0]),
            )
            raise consumer_errors[0]
        return Disposable(self.release)

    def release(self) -> None:
        if not self.guard.cancel("disposed"):
            return
        if self.counters is not None:
            self.counters.record_dispose()
        log_event(_logger, "bridge.dispose", self.ctx, level=logging.DEBUG)

    def failed(self, exc: BaseException) -> None:
        code = classify_exception(exc).value
        if self.counters is not None:
            self.counters.record_failure(code)
        log_event(
            _logger,
            "bridge.failure",
            self.ctx,
            level=logging.WARNING,
            error_code=code,
            error_type=type(exc).__name__,
            error=str(exc),
        )

    def late(self, result: Optional[GraphQLResult], error: Optional[BaseException]) -> None:
        log_event(
            _logger,
            "bridge.late_callback",
            self.ctx,
            level=logging.DEBUG,
            has_result=result is not None,
            has_error=error is not None,
        )


def one_shot(
    client: GraphQLClient,
    descriptor: OperationDescriptor,
    counters: Optional[BridgeCounters] = None,
) -> Single[Data]:
    """Bridge a fetch or perform descriptor into a :class:`Single`.

    The first handler invocation is terminal. Anything after it, or after
    disposal, is dropped.
    """
    if descriptor.kind is OperationKind.WATCH:
        raise ValueError("watch descriptors must be bridged with continuous()")

    def subscribe(sink: SingleSubscription[Data]) -> Disposable:
        reg = _Registration(client, descriptor, counters)

        def handler(result: Optional[GraphQLResult], error: Optional[BaseException]) -> None:
            if sink.terminated or sink.disposed:
                reg.late(result, error)
                return
            outcome = classify_outcome(result, error, reg.ctx)
            exc = outcome.to_exception()
            if exc is not None:
                reg.failed(exc)
                sink.error(exc)
                return
            log_event(_logger, "bridge.emit", reg.ctx, level=logging.DEBUG, has_data=outcome.data is not None)
            if sink.success(outcome.data) and counters is not None:
                counters.record_success()

        return reg.start(handler)

    return Single(subscribe)


def continuous(
    client: GraphQLClient,
    descriptor: OperationDescriptor,
    counters: Optional[BridgeCounters] = None,
) -> Observable[Data]:
    """Bridge a watch descriptor into an :class:`Observable`.

    Each successful invocation emits one value in delivery order; the first
    failure terminates the stream and releases the watcher.
    """
    if descriptor.kind is not OperationKind.WATCH:
        raise ValueError("only watch descriptors can be bridged continuously")

    def subscribe(sink: ObservableSubscription[Data]) -> Disposable:
        reg = _Registration(client, descriptor, counters)

        def handler(result: Optional[GraphQLResult], error: Optional[BaseException]) -> None:
            if not sink.active:
                reg.late(result, error)
                return
            outcome = classify_outcome(result, error, reg.ctx)
            exc = outcome.to_exception()
            if exc is not None:
                reg.failed(exc)
                sink.error(exc)
                return
            log_event(_logger, "bridge.emit", reg.ctx, level=logging.DEBUG, has_data=outcome.data is not None)
            if sink.next(outcome.data) and counters is not None:
                counters.record_emit()

        return reg.start(handler)

    return Observable(subscribe)


def fetch_single(
    client: GraphQLClient,
    query: GraphQLQuery,
    cache_policy: CachePolicy = CachePolicy.RETURN_CACHE_DATA_ELSE_FETCH,
    dispatch: Optional[DispatchContext] = None,
    *,
    counters: Optional[BridgeCounters] = None,
) -> Single[Data]:
    """Fetch ``query`` once, from the server or the cache per ``cache_policy``."""
    descriptor = OperationDescriptor(
        kind=OperationKind.FETCH,
        operation=query,
        cache_policy=cache_policy,
        dispatch=dispatch or ImmediateDispatch(),
    )
    return one_shot(client, descriptor, counters)


def perform_single(
    client: GraphQLClient,
    mutation: GraphQLMutation,
    dispatch: Optional[DispatchContext] = None,
    *,
    counters: Optional[BridgeCounters] = None,
) -> Single[Data]:
    """Send ``mutation`` to the server once."""
    descriptor = OperationDescriptor(
        kind=OperationKind.PERFORM,
        operation=mutation,
        dispatch=dispatch or ImmediateDispatch(),
    )
    return one_shot(client, descriptor, counters)


def watch_observable(
    client: GraphQLClient,
    query: GraphQLQuery,
    cache_policy: CachePolicy = CachePolicy.RETURN_CACHE_DATA_ELSE_FETCH,
    dispatch: Optional[DispatchContext] = None,
    *,
    counters: Optional[BridgeCounters] = None,
) -> Observable[Data]:
    """Watch ``query``: the initial result, then one value per relevant cache change."""
    descriptor = OperationDescriptor(
        kind=OperationKind.WATCH,
        operation=query,
        cache_policy=cache_policy,
        dispatch=dispatch or ImmediateDispatch(),
    )
    return continuous(client, descriptor, counters)


__all__ = [
    "Data",
    "one_shot",
    "continuous",
    "fetch_single",
    "perform_single",
    "watch_observable",
]
