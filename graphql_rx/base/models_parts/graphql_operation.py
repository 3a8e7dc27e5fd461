"""
GraphQL operation base type.

An operation is the typed request payload handed to the underlying client:
the document text, its variables and an optional operation name. Operations
are immutable; subclasses only pin the :class:`OperationType`.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional

from .operation_type import OperationType


@dataclass(frozen=True)
class GraphQLOperation:
    """Immutable GraphQL operation payload.

    Attributes:
        document: GraphQL document source.
        variables: Optional variable mapping (JSON-serializable).
        operation_name: Optional name selecting the operation in ``document``.
    """

    document: str
    variables: Optional[Mapping[str, Any]] = field(default=None, compare=True, hash=False)
    operation_name: Optional[str] = None

    operation_type: ClassVar[OperationType] = OperationType.QUERY

    def cache_key(self) -> str:
        """Return a stable key derived from the document and variables.

        Variable ordering does not affect the key.
        """
        canonical = json.dumps(dict(self.variables or {}), sort_keys=True, separators=(",", ":"), default=str)
        digest = hashlib.sha256(f"{self.document}\n{canonical}".encode("utf-8")).hexdigest()[:16]
        return f"{self.operation_name or self.operation_type.value}:{digest}"

    def to_dict(self) -> Dict[str, Any]:
        """Return the request body shape (``query``/``variables``/``operationName``)."""
        body: Dict[str, Any] = {"query": self.document}
        if self.variables:
            body["variables"] = dict(self.variables)
        if self.operation_name:
            body["operationName"] = self.operation_name
        return body


__all__ = ["GraphQLOperation"]
