"""GraphQL request/response models (public facade).

Re-exports the one-class-per-file implementations under ``models_parts`` to
keep a stable ``graphql_rx.base.models`` import path.
"""

from .models_parts import (
    CachePolicy,
    GraphQLError,
    GraphQLMutation,
    GraphQLOperation,
    GraphQLQuery,
    GraphQLResult,
    OperationType,
    PathSegment,
    ResultSource,
)

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
