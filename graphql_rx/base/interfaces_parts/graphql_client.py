"""GraphQLClient Protocol (single-class module).

The callback-based, cancellable client the bridge adapts. It is an external
collaborator: the bridge only relies on the three primitives below and on the
returned handle's idempotent ``cancel``.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

from ..cancellation import Cancellable
from ..dispatch import DispatchContext
from ..models import CachePolicy, GraphQLMutation, GraphQLQuery, GraphQLResult

ResultHandler = Callable[[Optional[GraphQLResult], Optional[BaseException]], None]


@runtime_checkable
class GraphQLClient(Protocol):
    """Callback-driven client exposing fetch, watch and perform.

    Handlers are invoked through ``dispatch`` with ``(result, error)``; exactly
    one of the two is expected to be set. ``fetch`` and ``perform`` invoke the
    handler once; ``watch`` invokes it for the initial result and again
    whenever dependent cached data changes, until cancelled.
    """

    def fetch(
        self,
        query: GraphQLQuery,
        cache_policy: CachePolicy,
        dispatch: DispatchContext,
        handler: ResultHandler,
    ) -> Cancellable:  # pragma: no cover - interface
        ...

    def watch(
        self,
        query: GraphQLQuery,
        cache_policy: CachePolicy,
        dispatch: DispatchContext,
        handler: ResultHandler,
    ) -> Cancellable:  # pragma: no cover - interface
        ...

    def perform(
        self,
        mutation: GraphQLMutation,
        dispatch: DispatchContext,
        handler: ResultHandler,
    ) -> Cancellable:  # pragma: no cover - interface
        ...


__all__ = ["GraphQLClient", "ResultHandler"]
