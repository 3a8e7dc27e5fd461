"""Errors parts package public surface.

Prefer importing from ``graphql_rx.base.errors`` for the stable surface.
"""

from .error_code import ErrorCode
from .rx_graphql_error import RxGraphQLError
from .graphql_errors_failure import GraphQLErrorsFailure
from .unknown_failure import UnknownFailure
from .bridge_timeout_error import BridgeTimeoutError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "RxGraphQLError",
    "GraphQLErrorsFailure",
    "UnknownFailure",
    "BridgeTimeoutError",
    "classify_exception",
]
