"""Failure for a result handler invoked with neither a result nor an error."""
from __future__ import annotations

from typing import ClassVar

from .error_code import ErrorCode
from .rx_graphql_error import RxGraphQLError


class UnknownFailure(RxGraphQLError):
    """The underlying client violated its callback contract.

    Also used when a sequence completes where a value was required.
    """

    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN

    def __init__(self, message: str = "result handler invoked without result or error") -> None:
        super().__init__(message)


__all__ = ["UnknownFailure"]
