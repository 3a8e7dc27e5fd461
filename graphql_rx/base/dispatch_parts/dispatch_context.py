"""Dispatch context contract.

The underlying client uses the caller-supplied context to choose where result
handlers run. The bridge itself never schedules work.
"""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class DispatchContext(Protocol):
    """Runs a zero-argument callable on some thread or loop."""

    def dispatch(self, fn: Callable[[], None]) -> None:  # pragma: no cover - interface
        ...


__all__ = ["DispatchContext"]
