"""Thread-safe in-memory counters for bridge subscriptions.

Every subscription records exactly one ``record_subscribe`` and, because
subscriptions dispose themselves after a terminal event, exactly one
``record_dispose``. ``in_flight`` is the difference.
"""

from __future__ import annotations

import time
from threading import RLock
from typing import Any, Dict

from .bridge_counters_snapshot import BridgeCountersSnapshot


class BridgeCounters:
    """Aggregate lifecycle counters across bridged operations."""

    __slots__ = (
        "_lock",
        "_subscribed",
        "_emitted",
        "_success",
        "_failure",
        "_disposed",
        "_subscribed_by_kind",
        "_failure_by_code",
    )

    def __init__(self) -> None:
        self._lock = RLock()
        self._subscribed = 0
        self._emitted = 0
        self._success = 0
        self._failure = 0
        self._disposed = 0
        self._subscribed_by_kind: Dict[str, int] = {}
        self._failure_by_code: Dict[str, int] = {}

    @staticmethod
    def monotonic_ms() -> int:
        return int(time.monotonic() * 1000)

    # -------------------------- Record Methods -------------------------- #
    def record_subscribe(self, kind: str) -> None:
        """Record a registration with the underlying client."""
        with self._lock:
            self._subscribed += 1
            self._subscribed_by_kind[kind] = self._subscribed_by_kind.get(kind, 0) + 1

    def record_emit(self) -> None:
        """Record one value emitted by a continuous stream."""
        with self._lock:
            self._emitted += 1

    def record_success(self) -> None:
        """Record a one-shot stream resolving with a value."""
        with self._lock:
            self._success += 1

    def record_failure(self, error_code: str) -> None:
        """Record a terminal failure classified as ``error_code``."""
        with self._lock:
            self._failure += 1
            self._failure_by_code[error_code] = self._failure_by_code.get(error_code, 0) + 1

    def record_dispose(self) -> None:
        """Record a subscription releasing its cancel handle."""
        with self._lock:
            self._disposed += 1

    # -------------------------- Snapshot API -------------------------- #
    def snapshot(self, reset: bool = False) -> BridgeCountersSnapshot:
        """Return an immutable snapshot; optionally zero the counters afterwards.

        ``in_flight`` is computed before a reset and is not itself reset.
        """
        with self._lock:
            snap = BridgeCountersSnapshot(
                subscribed=self._subscribed,
                emitted=self._emitted,
                success=self._success,
                failure=self._failure,
                disposed=self._disposed,
                in_flight=max(0, self._subscribed - self._disposed),
                subscribed_by_kind=dict(self._subscribed_by_kind),
                failure_by_code=dict(self._failure_by_code),
                generated_at_ms=self.monotonic_ms(),
            )
            if reset:
                self._subscribed = snap.in_flight
                self._emitted = 0
                self._success = 0
                self._failure = 0
                self._disposed = 0
                self._subscribed_by_kind.clear()
                self._failure_by_code.clear()
            return snap

    def as_dict(self, reset: bool = False) -> Dict[str, Any]:
        """Convenience wrapper returning snapshot converted to dictionary."""
        return self.snapshot(reset=reset).to_dict()


__all__ = ["BridgeCounters"]
