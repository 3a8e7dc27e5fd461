"""Base exception for failures raised by the bridge itself.

Transport failures are *not* wrapped in this type: the client's own exception
object is surfaced unchanged so callers can match on it.
"""
from __future__ import annotations

from typing import ClassVar

from .error_code import ErrorCode


class RxGraphQLError(Exception):
    """Root of the bridge error hierarchy; carries a normalized ``code``."""

    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN


__all__ = ["RxGraphQLError"]
