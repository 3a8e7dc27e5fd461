"""
Application-level GraphQL error returned alongside a (partial) result.

Mirrors the ``errors[]`` entry of a GraphQL response: a message plus optional
source locations, response path and free-form extensions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

PathSegment = Union[str, int]


@dataclass(frozen=True)
class GraphQLError:
    """Structured domain error reported by the server.

    Attributes:
        message: Human-readable description.
        locations: ``(line, column)`` pairs in the request document.
        path: Response path of the field that failed.
        extensions: Server-specific metadata (e.g. ``{"code": "FORBIDDEN"}``).
    """

    message: str
    locations: Tuple[Tuple[int, int], ...] = ()
    path: Tuple[PathSegment, ...] = ()
    extensions: Optional[Mapping[str, Any]] = field(default=None, hash=False)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "GraphQLError":
        """Build an error from its wire representation.

        Missing ``message`` becomes an empty string; malformed locations are
        skipped rather than rejected.
        """
        locations = tuple(
            (int(loc["line"]), int(loc["column"]))
            for loc in payload.get("locations") or ()
            if isinstance(loc, Mapping) and "line" in loc and "column" in loc
        )
        return cls(
            message=str(payload.get("message", "")),
            locations=locations,
            path=tuple(payload.get("path") or ()),
            extensions=payload.get("extensions"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation, omitting empty members."""
        out: Dict[str, Any] = {"message": self.message}
        if self.locations:
            out["locations"] = [{"line": line, "column": col} for line, col in self.locations]
        if self.path:
            out["path"] = list(self.path)
        if self.extensions:
            out["extensions"] = dict(self.extensions)
        return out

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = ".".join(str(p) for p in self.path)
        return f"{self.message} (at {where})" if where else self.message


__all__ = ["GraphQLError", "PathSegment"]
