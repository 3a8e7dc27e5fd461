"""
Cache policy enumeration for query operations.

Values are lowercase snake_case so they can be supplied verbatim through
environment variables or a config file.
"""
from __future__ import annotations

from enum import Enum


class CachePolicy(str, Enum):
    """When a query result is read from the local cache versus the server."""

    RETURN_CACHE_DATA_ELSE_FETCH = "return_cache_data_else_fetch"
    FETCH_IGNORING_CACHE_DATA = "fetch_ignoring_cache_data"
    RETURN_CACHE_DATA_DONT_FETCH = "return_cache_data_dont_fetch"
    RETURN_CACHE_DATA_AND_FETCH = "return_cache_data_and_fetch"

    @classmethod
    def parse(cls, value: "str | CachePolicy | None", default: "CachePolicy") -> "CachePolicy":
        """Coerce a raw value into a policy, falling back to ``default``.

        Accepts the enum itself, its value, or its name in any case; dashes
        are treated as underscores (``return-cache-data-else-fetch``).
        """
        if isinstance(value, CachePolicy):
            return value
        if not value:
            return default
        key = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if member.value == key:
                return member
        return default


__all__ = ["CachePolicy"]
