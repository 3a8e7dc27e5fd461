"""Origin of a delivered result (server round-trip or local cache)."""
from __future__ import annotations

from enum import Enum


class ResultSource(str, Enum):
    """Where a :class:`GraphQLResult` was produced."""

    SERVER = "server"
    CACHE = "cache"


__all__ = ["ResultSource"]
