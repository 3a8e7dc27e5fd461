"""
GraphQL result delivered by the underlying client to a result handler.

``data`` may be ``None`` (nothing satisfiable yet, or the server returned
``null``). ``errors`` being ``None`` or empty both mean "no application
errors".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .graphql_error import GraphQLError
from .result_source import ResultSource


@dataclass
class GraphQLResult:
    """Response payload of a single client invocation."""

    data: Optional[Mapping[str, Any]] = None
    errors: Optional[List[GraphQLError]] = None
    source: ResultSource = ResultSource.SERVER

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], source: ResultSource = ResultSource.SERVER) -> "GraphQLResult":
        """Parse a ``{"data": ..., "errors": [...]}`` response body."""
        raw_errors = payload.get("errors")
        errors = [GraphQLError.from_dict(e) for e in raw_errors] if raw_errors is not None else None
        return cls(data=payload.get("data"), errors=errors, source=source)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"data": self.data}
        if self.errors is not None:
            out["errors"] = [e.to_dict() for e in self.errors]
        return out


__all__ = ["GraphQLResult"]
