"""
Exception classification helpers mapping failures to :class:`ErrorCode`.

Used for structured log fields and metrics keys; classification never alters
the exception delivered to the stream consumer.
"""
from __future__ import annotations

import asyncio
import concurrent.futures

from .error_code import ErrorCode
from .rx_graphql_error import RxGraphQLError


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. Bridge errors report their own code.
        2. Timeout exceptions (sync/async).
        3. Cancellation (asyncio / futures).
        4. Anything else came from the client: ``TRANSPORT``.
    """
    if isinstance(exc, RxGraphQLError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, concurrent.futures.TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (asyncio.CancelledError, concurrent.futures.CancelledError)):
        return ErrorCode.CANCELLED
    return ErrorCode.TRANSPORT


__all__ = ["classify_exception"]
