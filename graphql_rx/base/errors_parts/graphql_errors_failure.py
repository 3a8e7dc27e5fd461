"""Failure carrying the application-level errors returned with a result."""
from __future__ import annotations

from typing import ClassVar, Iterable, Tuple

from ..models import GraphQLError
from .error_code import ErrorCode
from .rx_graphql_error import RxGraphQLError


class GraphQLErrorsFailure(RxGraphQLError):
    """One or more :class:`GraphQLError` were returned by the server.

    The full list is kept in server order; nothing is truncated or
    deduplicated.
    """

    code: ClassVar[ErrorCode] = ErrorCode.GRAPHQL

    def __init__(self, errors: Iterable[GraphQLError]) -> None:
        self.errors: Tuple[GraphQLError, ...] = tuple(errors)
        summary = "; ".join(e.message for e in self.errors) or "no error messages"
        super().__init__(f"{len(self.errors)} GraphQL error(s): {summary}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphQLErrorsFailure):
            return NotImplemented
        return self.errors == other.errors

    __hash__ = None  # type: ignore[assignment]


__all__ = ["GraphQLErrorsFailure"]
