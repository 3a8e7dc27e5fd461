"""Per-subscription context attached to every bridge log event."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class LogContext:
    """Immutable bag of fields shared by all events of one subscription.

    ``extra`` holds anything beyond the named operation fields; ``bind``
    returns a copy with more of it.
    """

    operation_name: Optional[str] = None
    operation_type: Optional[str] = None
    cache_policy: Optional[str] = None
    subscription_id: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def bind(self, **fields: Any) -> "LogContext":
        return replace(self, extra={**self.extra, **fields})

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to a JSON-ready dict; ``None`` values are omitted."""
        out: Dict[str, Any] = {
            "operation_name": self.operation_name,
            "operation_type": self.operation_type,
            "cache_policy": self.cache_policy,
            "subscription_id": self.subscription_id,
            **self.extra,
        }
        return {k: v for k, v in out.items() if v is not None}


__all__ = ["LogContext"]
