"""Deterministic in-memory GraphQL client for tests and local development.

Purpose
-------
Implement the callback-based ``GraphQLClient`` contract without any network
traffic, so the stream bridge and its consumers can be exercised end to end.
Server responses come from canned entries (``set_response`` / ``set_error``)
or from a caller-supplied ``responder``; query results live in a
:class:`ResultCache` that honours the four cache policies and notifies
watchers when their data changes.

Delivery
--------
Handlers always run through the caller's dispatch context and are skipped
once the corresponding handle is cancelled. With ``deferred=True`` all work
is queued until :meth:`InMemoryGraphQLClient.flush`, which lets tests dispose
a stream before its first callback.
"""

from __future__ import annotations

import copy
import logging
from collections import deque
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Deque, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..base.dispatch import DispatchContext
from ..base.interfaces import ResultHandler
from ..base.logging import get_logger, log_event
from ..base.models import (
    CachePolicy,
    GraphQLError,
    GraphQLMutation,
    GraphQLOperation,
    GraphQLQuery,
    GraphQLResult,
    ResultSource,
)
from .cache import ResultCache
from .cancellable import ClientCancellable

ServerOutcome = Union[GraphQLResult, BaseException, None]
Responder = Callable[[GraphQLOperation], ServerOutcome]


@dataclass(eq=False)
class _Watcher:
    key: str
    dispatch: DispatchContext
    handler: ResultHandler
    handle: ClientCancellable


class InMemoryGraphQLClient:
    """``GraphQLClient`` backed by canned server responses and a local cache.

    Attributes
    ----------
    cache:
        Query result cache shared by fetch and watch.
    requests:
        Every operation that reached the simulated server, in order.
    deferred:
        When ``True``, work is queued until :meth:`flush`.
    """

    def __init__(
        self,
        *,
        responder: Optional[Responder] = None,
        cache: Optional[ResultCache] = None,
        deferred: bool = False,
    ) -> None:
        self.cache = cache if cache is not None else ResultCache()
        self.deferred = deferred
        self.requests: List[GraphQLOperation] = []
        self._responder = responder
        self._responses: Dict[str, Tuple[ServerOutcome]] = {}
        self._watchers: Dict[str, List[_Watcher]] = {}
        self._pending: Deque[Callable[[], None]] = deque()
        self._lock = RLock()
        self._logger = get_logger("graphql_rx.mock")

    # ------------------------------------------------------------------ #
    # Canned server responses
    # ------------------------------------------------------------------ #
    def respond(self, operation: GraphQLOperation, outcome: ServerOutcome) -> None:
        """Register the raw server outcome for ``operation``.

        ``None`` makes the client call the handler with neither a result nor
        an error.
        """
        with self._lock:
            self._responses[operation.cache_key()] = (outcome,)

    def set_response(
        self,
        operation: GraphQLOperation,
        data: Optional[Mapping[str, object]] = None,
        errors: Optional[Iterable[GraphQLError]] = None,
    ) -> None:
        """Register a result with ``data`` and optional application ``errors``."""
        self.respond(operation, GraphQLResult(data=data, errors=list(errors) if errors is not None else None))

    def set_error(self, operation: GraphQLOperation, error: BaseException) -> None:
        """Register a transport error for ``operation``."""
        self.respond(operation, error)

    def _network(self, operation: GraphQLOperation) -> Tuple[Optional[GraphQLResult], Optional[BaseException]]:
        with self._lock:
            self.requests.append(operation)
            entry = self._responses.get(operation.cache_key())
        log_event(
            self._logger,
            "mock.request",
            level=logging.DEBUG,
            operation_name=operation.operation_name,
            operation_type=operation.operation_type.value,
        )
        if self._responder is not None:
            outcome = self._responder(operation)
        elif entry is not None:
            outcome = entry[0]
        else:
            outcome = ConnectionError(f"no response registered for {operation.cache_key()}")
        if isinstance(outcome, BaseException):
            return None, outcome
        if outcome is None:
            return None, None
        return (
            GraphQLResult(
                data=copy.deepcopy(outcome.data),
                errors=list(outcome.errors) if outcome.errors is not None else None,
                source=ResultSource.SERVER,
            ),
            None,
        )

    # ------------------------------------------------------------------ #
    # Scheduling and delivery
    # ------------------------------------------------------------------ #
    def _schedule(self, work: Callable[[], None]) -> None:
        if self.deferred:
            with self._lock:
                self._pending.append(work)
            return
        work()

    @staticmethod
    def _deliver(
        handle: ClientCancellable,
        dispatch: DispatchContext,
        handler: ResultHandler,
        result: Optional[GraphQLResult],
        error: Optional[BaseException],
    ) -> None:
        if handle.cancelled:
            return

        def invoke() -> None:
            if not handle.cancelled:
                handler(result, error)

        dispatch.dispatch(invoke)

    def flush(self) -> int:
        """Run queued work in FIFO order, including work queued meanwhile.

        Returns the number of items run.
        """
        ran = 0
        while True:
            with self._lock:
                if not self._pending:
                    return ran
                work = self._pending.popleft()
            work()
            ran += 1

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    # ------------------------------------------------------------------ #
    # Cache and watchers
    # ------------------------------------------------------------------ #
    def _store(self, key: str, data: Mapping[str, object], origin: Optional[ClientCancellable] = None) -> None:
        if not self.cache.write(key, data):
            return
        with self._lock:
            watchers = [w for w in self._watchers.get(key, ()) if w.handle is not origin]
        for watcher in watchers:
            cached = GraphQLResult(data=self.cache.read(key), source=ResultSource.CACHE)
            self._deliver(watcher.handle, watcher.dispatch, watcher.handler, cached, None)

    def _remove_watcher(self, watcher: _Watcher) -> None:
        with self._lock:
            group = self._watchers.get(watcher.key, [])
            if watcher in group:
                group.remove(watcher)
            if not group:
                self._watchers.pop(watcher.key, None)

    def write(self, query: GraphQLQuery, data: Mapping[str, object]) -> None:
        """Write ``data`` for ``query`` into the cache, notifying its watchers on change."""
        self._store(query.cache_key(), data)

    def push(
        self,
        query: GraphQLQuery,
        result: Optional[GraphQLResult] = None,
        error: Optional[BaseException] = None,
    ) -> int:
        """Invoke every live watcher of ``query`` with ``(result, error)`` as-is.

        Bypasses the cache; used to simulate arbitrary watcher callbacks such
        as a dropped connection. Returns the number of watchers invoked.
        """
        with self._lock:
            watchers = list(self._watchers.get(query.cache_key(), ()))
        for watcher in watchers:
            self._deliver(watcher.handle, watcher.dispatch, watcher.handler, result, error)
        return len(watchers)

    def watcher_count(self, query: Optional[GraphQLQuery] = None) -> int:
        with self._lock:
            if query is not None:
                return len(self._watchers.get(query.cache_key(), ()))
            return sum(len(group) for group in self._watchers.values())

    # ------------------------------------------------------------------ #
    # GraphQLClient primitives
    # ------------------------------------------------------------------ #
    def _resolve_query(
        self,
        query: GraphQLQuery,
        cache_policy: CachePolicy,
        dispatch: DispatchContext,
        handler: ResultHandler,
        handle: ClientCancellable,
    ) -> None:
        if handle.cancelled:
            return
        key = query.cache_key()
        cached = self.cache.read(key)
        if cache_policy is CachePolicy.RETURN_CACHE_DATA_DONT_FETCH:
            self._deliver(handle, dispatch, handler, GraphQLResult(data=cached, source=ResultSource.CACHE), None)
            return
        if cached is not None and cache_policy in (
            CachePolicy.RETURN_CACHE_DATA_ELSE_FETCH,
            CachePolicy.RETURN_CACHE_DATA_AND_FETCH,
        ):
            self._deliver(handle, dispatch, handler, GraphQLResult(data=cached, source=ResultSource.CACHE), None)
            if cache_policy is CachePolicy.RETURN_CACHE_DATA_ELSE_FETCH:
                return
        result, error = self._network(query)
        if handle.cancelled:
            return
        if result is not None and not result.errors and result.data is not None:
            self._store(key, result.data, origin=handle)
        self._deliver(handle, dispatch, handler, result, error)

    def fetch(
        self,
        query: GraphQLQuery,
        cache_policy: CachePolicy,
        dispatch: DispatchContext,
        handler: ResultHandler,
    ) -> ClientCancellable:
        handle = ClientCancellable()
        self._schedule(lambda: self._resolve_query(query, cache_policy, dispatch, handler, handle))
        return handle

    def watch(
        self,
        query: GraphQLQuery,
        cache_policy: CachePolicy,
        dispatch: DispatchContext,
        handler: ResultHandler,
    ) -> ClientCancellable:
        handle = ClientCancellable()
        watcher = _Watcher(key=query.cache_key(), dispatch=dispatch, handler=handler, handle=handle)
        with self._lock:
            self._watchers.setdefault(watcher.key, []).append(watcher)
        handle.on_cancel(lambda: self._remove_watcher(watcher))
        self._schedule(lambda: self._resolve_query(query, cache_policy, dispatch, handler, handle))
        return handle

    def perform(
        self,
        mutation: GraphQLMutation,
        dispatch: DispatchContext,
        handler: ResultHandler,
    ) -> ClientCancellable:
        handle = ClientCancellable()

        def run() -> None:
            if handle.cancelled:
                return
            result, error = self._network(mutation)
            self._deliver(handle, dispatch, handler, result, error)

        self._schedule(run)
        return handle


__all__ = ["InMemoryGraphQLClient", "Responder", "ServerOutcome"]
