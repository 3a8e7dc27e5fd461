"""
Normalized bridge error codes (taxonomy).

Values are lowercase snake_case and are a stable contract for logging and
metrics keys.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated failure categories surfaced by the stream bridge."""

    TRANSPORT = "transport"
    GRAPHQL = "graphql"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
