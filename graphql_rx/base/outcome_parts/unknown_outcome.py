"""Outcome: handler invoked with neither a result nor an error."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..errors import ErrorCode, UnknownFailure


@dataclass(frozen=True)
class UnknownOutcome:
    """Contract violation by the underlying client, not a stream-logic error."""

    is_failure: ClassVar[bool] = True
    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN

    def to_exception(self) -> UnknownFailure:
        return UnknownFailure()


__all__ = ["UnknownOutcome"]
