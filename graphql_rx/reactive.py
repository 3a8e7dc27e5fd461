"""Reactive facade over a callback-based GraphQL client.

``rx(client).fetch(query)`` reads like the client call it wraps but returns
a stream instead of taking a handler:

    >>> rx(client).fetch(query).subscribe(print)          # doctest: +SKIP
    >>> sub = rx(client).watch(query).subscribe(render)   # doctest: +SKIP
    >>> sub.dispose()                                     # doctest: +SKIP

Omitted cache policies come from the bridge configuration; omitted dispatch
contexts default to inline delivery.
"""
from __future__ import annotations

from typing import Optional

from .base.dispatch import DispatchContext, ImmediateDispatch
from .base.interfaces import GraphQLClient
from .base.metrics import BridgeCounters
from .base.models import CachePolicy, GraphQLMutation, GraphQLQuery
from .base.streaming import Data, Observable, Single, fetch_single, perform_single, watch_observable
from .config import BridgeConfig, get_bridge_config


class ReactiveClient:
    """Stream-returning view of a :class:`GraphQLClient`.

    Holds no per-call state; every method returns a cold stream and each
    subscription registers with ``client`` independently.
    """

    def __init__(
        self,
        client: GraphQLClient,
        *,
        counters: Optional[BridgeCounters] = None,
        config: Optional[BridgeConfig] = None,
        dispatch: Optional[DispatchContext] = None,
    ) -> None:
        if not isinstance(client, GraphQLClient):
            raise TypeError(f"{type(client).__name__} does not implement fetch/watch/perform")
        self.client = client
        self.counters = counters if counters is not None else BridgeCounters()
        self._config = config
        self._dispatch = dispatch or ImmediateDispatch()

    @property
    def config(self) -> BridgeConfig:
        return self._config or get_bridge_config()

    def _policy(self, cache_policy: Optional[CachePolicy]) -> CachePolicy:
        return cache_policy if cache_policy is not None else self.config.default_cache_policy

    def fetch(
        self,
        query: GraphQLQuery,
        cache_policy: Optional[CachePolicy] = None,
        dispatch: Optional[DispatchContext] = None,
    ) -> Single[Data]:
        """Fetch ``query`` once; see :func:`fetch_single`."""
        return fetch_single(
            self.client,
            query,
            self._policy(cache_policy),
            dispatch or self._dispatch,
            counters=self.counters,
        )

    def watch(
        self,
        query: GraphQLQuery,
        cache_policy: Optional[CachePolicy] = None,
        dispatch: Optional[DispatchContext] = None,
    ) -> Observable[Data]:
        """Watch ``query`` until disposed; see :func:`watch_observable`."""
        return watch_observable(
            self.client,
            query,
            self._policy(cache_policy),
            dispatch or self._dispatch,
            counters=self.counters,
        )

    def perform(self, mutation: GraphQLMutation, dispatch: Optional[DispatchContext] = None) -> Single[Data]:
        """Perform ``mutation`` once; see :func:`perform_single`."""
        return perform_single(self.client, mutation, dispatch or self._dispatch, counters=self.counters)


def rx(client: GraphQLClient, **kwargs) -> ReactiveClient:
    """Shorthand for ``ReactiveClient(client, **kwargs)``."""
    return ReactiveClient(client, **kwargs)


__all__ = ["ReactiveClient", "rx"]
