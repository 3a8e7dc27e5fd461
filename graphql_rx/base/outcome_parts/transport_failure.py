"""Outcome: the client reported a transport-level error."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..errors import ErrorCode


@dataclass(frozen=True)
class TransportFailure:
    """Network, serialization or client-internal failure.

    ``cause`` is surfaced to the consumer unchanged.
    """

    cause: BaseException

    is_failure: ClassVar[bool] = True
    code: ClassVar[ErrorCode] = ErrorCode.TRANSPORT

    def to_exception(self) -> BaseException:
        return self.cause


__all__ = ["TransportFailure"]
