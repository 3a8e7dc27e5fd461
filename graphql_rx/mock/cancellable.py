"""Cancel handle issued by the in-memory client."""

from __future__ import annotations

from threading import Lock
from typing import Callable, List


class ClientCancellable:
    """Idempotent cancel handle that records every ``cancel`` call.

    ``cancel_count`` counts calls (including redundant ones) so tests can
    assert how often a consumer cancelled; the registered hooks run once.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._hooks: List[Callable[[], None]] = []
        self.cancelled = False
        self.cancel_count = 0

    def on_cancel(self, hook: Callable[[], None]) -> None:
        """Register a hook run on the first ``cancel``; runs now if already cancelled."""
        with self._lock:
            if not self.cancelled:
                self._hooks.append(hook)
                return
        hook()

    def cancel(self) -> None:
        with self._lock:
            self.cancel_count += 1
            if self.cancelled:
                return
            self.cancelled = True
            hooks, self._hooks = self._hooks, []
        for hook in hooks:
            hook()


__all__ = ["ClientCancellable"]
