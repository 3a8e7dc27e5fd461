"""Cancel handle contract returned by the underlying client.

Implementations must make ``cancel`` idempotent: safe to call repeatedly and
after the operation already finished.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Cancellable(Protocol):
    """Opaque capability to stop an in-flight or continuous operation."""

    def cancel(self) -> None:  # pragma: no cover - interface
        ...


__all__ = ["Cancellable"]
