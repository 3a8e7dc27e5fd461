"""Single-invocation wrapper around a client cancel handle.

The bridge holds one ``GuardedCancel`` per subscription. The handle may be
attached *after* cancellation was requested: a client using an inline
dispatch context can deliver its only callback (and so finalize the stream)
before ``fetch`` has returned the handle. In that case the handle is
cancelled as soon as it is attached.
"""

from __future__ import annotations

from threading import Lock

from .cancellable import Cancellable
from .state import State


class GuardedCancel:
    """Invoke the wrapped ``cancel`` at most once, from any thread."""

    def __init__(self, handle: Cancellable | None = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._handle = handle

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    @property
    def cancelled_at(self) -> float | None:
        """``time.monotonic()`` of the first cancel, or ``None``."""
        return self._state.cancelled_at

    def attach(self, handle: Cancellable) -> None:
        """Bind the client handle; cancels it immediately if already requested."""
        with self._lock:
            if not self._state.cancelled:
                self._handle = handle
                return
        handle.cancel()

    def cancel(self, reason: str | None = None) -> bool:
        """Cancel the wrapped handle once. Returns ``True`` on the first call."""
        with self._lock:
            if not self._state.mark(reason):
                return False
            handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()
        return True

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"GuardedCancel(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


__all__ = ["GuardedCancel"]
