"""Model parts package (one class per module); prefer ``graphql_rx.base.models``."""

from .cache_policy import CachePolicy
from .graphql_error import GraphQLError, PathSegment
from .graphql_mutation import GraphQLMutation
from .graphql_operation import GraphQLOperation
from .graphql_query import GraphQLQuery
from .graphql_result import GraphQLResult
from .operation_type import OperationType
from .result_source import ResultSource

__all__ = [
    "CachePolicy",
    "GraphQLError",
    "GraphQLMutation",
    "GraphQLOperation",
    "GraphQLQuery",
    "GraphQLResult",
    "OperationType",
    "PathSegment",
    "ResultSource",
]
