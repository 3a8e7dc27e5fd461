"""Cancel bookkeeping for :class:`GuardedCancel`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Records the first cancel request; callers hold the owning lock."""

    cancelled: bool = False
    reason: Optional[str] = None
    cancelled_at: Optional[float] = None

    def mark(self, reason: Optional[str]) -> bool:
        """Flip to cancelled. ``False`` when an earlier request already did."""
        if self.cancelled:
            return False
        self.cancelled = True
        self.reason = reason
        self.cancelled_at = time.monotonic()
        return True


__all__ = ["State"]
