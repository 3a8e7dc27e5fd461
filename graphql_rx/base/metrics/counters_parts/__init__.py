"""Counter parts (one class per module)."""

from .bridge_counters import BridgeCounters
from .bridge_counters_snapshot import BridgeCountersSnapshot

__all__ = ["BridgeCounters", "BridgeCountersSnapshot"]
