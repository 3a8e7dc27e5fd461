"""Outcome: the result carried one or more application-level errors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..errors import ErrorCode, GraphQLErrorsFailure
from ..models import GraphQLError


@dataclass(frozen=True)
class ApplicationFailure:
    """Ordered, non-empty list of domain errors returned with the call."""

    errors: Tuple[GraphQLError, ...]

    is_failure: ClassVar[bool] = True
    code: ClassVar[ErrorCode] = ErrorCode.GRAPHQL

    def to_exception(self) -> GraphQLErrorsFailure:
        return GraphQLErrorsFailure(self.errors)


__all__ = ["ApplicationFailure"]
