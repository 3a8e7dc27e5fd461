"""Executor-backed dispatch (thread or process pool)."""
from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from typing import Callable

from ..logging import get_logger, log_event

_logger = get_logger("graphql_rx.dispatch")


class ExecutorDispatch:
    """Submit each handler call to a ``concurrent.futures.Executor``.

    A single-worker executor preserves callback order; wider pools do not.
    """

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def dispatch(self, fn: Callable[[], None]) -> None:
        future = self._executor.submit(fn)
        future.add_done_callback(_report_failure)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"ExecutorDispatch({self._executor!r})"


def _report_failure(future: "Future[None]") -> None:
    """Log handler exceptions that would otherwise vanish inside the future."""
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        log_event(
            _logger,
            "dispatch.handler_error",
            level=logging.ERROR,
            error_type=type(exc).__name__,
            error=str(exc),
        )


__all__ = ["ExecutorDispatch"]
