"""Timeout raised by the ``timeout`` stream operator."""
from __future__ import annotations

from typing import ClassVar

from .error_code import ErrorCode
from .rx_graphql_error import RxGraphQLError


class BridgeTimeoutError(RxGraphQLError, TimeoutError):
    """No terminal event arrived within the allotted seconds."""

    code: ClassVar[ErrorCode] = ErrorCode.TIMEOUT

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"operation did not complete within {seconds:g}s")


__all__ = ["BridgeTimeoutError"]
