"""
Bridge Base Package

Client-agnostic contracts and machinery for exposing a callback-based GraphQL
client as reactive streams:

- Models: operations, results, errors, cache policy
- Interfaces: the ``GraphQLClient`` collaborator contract
- Classifier: ``(result, error)`` -> callback outcome
- Streaming: ``Single``/``Observable`` and the fetch/watch/perform bridge
"""

from .cancellation import Cancellable, GuardedCancel
from .classifier import classify_outcome
from .dispatch import AsyncioDispatch, DispatchContext, ExecutorDispatch, ImmediateDispatch
from .dto import OperationDescriptor, OperationKind
from .errors import (
    BridgeTimeoutError,
    ErrorCode,
    GraphQLErrorsFailure,
    RxGraphQLError,
    UnknownFailure,
    classify_exception,
)
from .interfaces import GraphQLClient, ResultHandler
from .metrics import BridgeCounters, BridgeCountersSnapshot
from .models import (
    CachePolicy,
    GraphQLError,
    GraphQLMutation,
    GraphQLOperation,
    GraphQLQuery,
    GraphQLResult,
    OperationType,
    ResultSource,
)
from .outcome import ApplicationFailure, CallbackOutcome, Success, TransportFailure, UnknownOutcome
from .streaming import (
    Disposable,
    Observable,
    Single,
    fetch_single,
    perform_single,
    watch_observable,
)

__all__ = [
    "Cancellable",
    "GuardedCancel",
    "classify_outcome",
    "AsyncioDispatch",
    "DispatchContext",
    "ExecutorDispatch",
    "ImmediateDispatch",
    "OperationDescriptor",
    "OperationKind",
    "BridgeTimeoutError",
    "ErrorCode",
    "GraphQLErrorsFailure",
    "RxGraphQLError",
    "UnknownFailure",
    "classify_exception",
    "GraphQLClient",
    "ResultHandler",
    "BridgeCounters",
    "BridgeCountersSnapshot",
    "CachePolicy",
    "GraphQLError",
    "GraphQLMutation",
    "GraphQLOperation",
    "GraphQLQuery",
    "GraphQLResult",
    "OperationType",
    "ResultSource",
    "ApplicationFailure",
    "CallbackOutcome",
    "Success",
    "TransportFailure",
    "UnknownOutcome",
    "Disposable",
    "Observable",
    "Single",
    "fetch_single",
    "perform_single",
    "watch_observable",
]
