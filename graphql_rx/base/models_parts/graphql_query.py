"""Query operation type (fetch and watch)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .graphql_operation import GraphQLOperation
from .operation_type import OperationType


@dataclass(frozen=True)
class GraphQLQuery(GraphQLOperation):
    """A read-only operation; eligible for caching and watching."""

    operation_type: ClassVar[OperationType] = OperationType.QUERY


__all__ = ["GraphQLQuery"]
