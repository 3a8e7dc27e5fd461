"""Operation type enumeration (query vs. mutation)."""
from __future__ import annotations

from enum import Enum


class OperationType(str, Enum):
    """GraphQL operation type of a document."""

    QUERY = "query"
    MUTATION = "mutation"


__all__ = ["OperationType"]
