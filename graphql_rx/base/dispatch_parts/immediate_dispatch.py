"""Inline dispatch: the handler runs on the calling thread."""
from __future__ import annotations

from typing import Callable


class ImmediateDispatch:
    """Call ``fn`` synchronously. Default context for the reactive facade."""

    def dispatch(self, fn: Callable[[], None]) -> None:
        fn()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return "ImmediateDispatch()"


__all__ = ["ImmediateDispatch"]
