"""graphql_rx package

Reactive streams over a callback-based, cancellable GraphQL client.

Public API (re-exported):
    - Version: ``__version__``
    - Facade: :class:`ReactiveClient`, :func:`rx`
    - Streams: :class:`Single`, :class:`Observable`, :class:`Disposable`
    - Bridge functions: :func:`fetch_single`, :func:`perform_single`,
      :func:`watch_observable`
    - Models: :class:`GraphQLQuery`, :class:`GraphQLMutation`,
      :class:`GraphQLResult`, :class:`GraphQLError`, :class:`CachePolicy`
    - Errors: :class:`GraphQLErrorsFailure`, :class:`UnknownFailure`,
      :class:`BridgeTimeoutError`, :class:`ErrorCode`
"""

from .base import (
    AsyncioDispatch,
    BridgeCounters,
    BridgeTimeoutError,
    CachePolicy,
    Disposable,
    ErrorCode,
    ExecutorDispatch,
    GraphQLClient,
    GraphQLError,
    GraphQLErrorsFailure,
    GraphQLMutation,
    GraphQLQuery,
    GraphQLResult,
    ImmediateDispatch,
    Observable,
    RxGraphQLError,
    Single,
    UnknownFailure,
    classify_outcome,
    fetch_single,
    perform_single,
    watch_observable,
)
from .config import BridgeConfig, get_bridge_config
from .reactive import ReactiveClient, rx

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ReactiveClient",
    "rx",
    "Single",
    "Observable",
    "Disposable",
    "fetch_single",
    "perform_single",
    "watch_observable",
    "classify_outcome",
    "GraphQLClient",
    "GraphQLQuery",
    "GraphQLMutation",
    "GraphQLResult",
    "GraphQLError",
    "CachePolicy",
    "ImmediateDispatch",
    "ExecutorDispatch",
    "AsyncioDispatch",
    "BridgeCounters",
    "BridgeConfig",
    "get_bridge_config",
    "RxGraphQLError",
    "GraphQLErrorsFailure",
    "UnknownFailure",
    "BridgeTimeoutError",
    "ErrorCode",
]
