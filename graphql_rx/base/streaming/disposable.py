"""Disposal primitive shared by every stream subscription.

A ``Disposable`` runs its action at most once. The action may be bound after
construction with ``set_action``; binding to an already-disposed instance
runs the action right away. This covers subscriptions that finalize while
their upstream is still being registered.
"""
from __future__ import annotations

from threading import Lock
from typing import Callable, Optional


class Disposable:
    """Idempotent, thread-safe release hook."""

    def __init__(self, action: Optional[Callable[[], None]] = None) -> None:
        self._lock = Lock()
        self._disposed = False
        self._action = action

    @property
    def disposed(self) -> bool:  # noqa: D401 - short property
        """Whether ``dispose`` has been called."""
        return self._disposed

    def set_action(self, action: Callable[[], None]) -> None:
        """Bind the release action, or run it now if already disposed."""
        with self._lock:
            if not self._disposed:
                self._action = action
                return
        action()

    def dispose(self) -> None:
        """Run the action once; later calls are no-ops."""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            action, self._action = self._action, None
        if action is not None:
            action()


__all__ = ["Disposable"]
