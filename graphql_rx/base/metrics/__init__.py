"""Bridge metrics: in-memory subscription counters."""

from .counters_parts import BridgeCounters, BridgeCountersSnapshot

__all__ = ["BridgeCounters", "BridgeCountersSnapshot"]
