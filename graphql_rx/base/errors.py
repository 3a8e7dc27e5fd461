"""Unified bridge error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``graphql_rx.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    BridgeTimeoutError,
    ErrorCode,
    GraphQLErrorsFailure,
    RxGraphQLError,
    UnknownFailure,
    classify_exception,
)

__all__ = [
    "ErrorCode",
    "RxGraphQLError",
    "GraphQLErrorsFailure",
    "UnknownFailure",
    "BridgeTimeoutError",
    "classify_exception",
]
