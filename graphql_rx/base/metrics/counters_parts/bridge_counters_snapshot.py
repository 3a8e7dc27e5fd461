"""Bridge counters snapshot dataclass.

Immutable snapshot of :class:`BridgeCounters`, designed for serialization and
logging.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class BridgeCountersSnapshot:
    """Point-in-time view of bridge subscription counters.

    ``subscribed_by_kind`` is keyed by ``fetch``/``watch``/``perform`` and
    ``failure_by_code`` by :class:`ErrorCode` value.
    """

    subscribed: int
    emitted: int
    success: int
    failure: int
    disposed: int
    in_flight: int
    subscribed_by_kind: Dict[str, int]
    failure_by_code: Dict[str, int]
    generated_at_ms: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation suitable for JSON serialization."""
        return asdict(self)


__all__ = ["BridgeCountersSnapshot"]
