"""Outcome: a result without errors; ``data`` may be ``None``."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping, Optional


@dataclass(frozen=True)
class Success:
    """Successful invocation. ``None`` data means nothing satisfiable yet."""

    data: Optional[Mapping[str, Any]] = field(default=None, hash=False)

    is_failure: ClassVar[bool] = False

    def to_exception(self) -> None:
        return None


__all__ = ["Success"]
