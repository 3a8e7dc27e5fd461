"""Mutation operation type (perform)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .graphql_operation import GraphQLOperation
from .operation_type import OperationType


@dataclass(frozen=True)
class GraphQLMutation(GraphQLOperation):
    """A write operation; always sent to the server, never watched."""

    operation_type: ClassVar[OperationType] = OperationType.MUTATION


__all__ = ["GraphQLMutation"]
