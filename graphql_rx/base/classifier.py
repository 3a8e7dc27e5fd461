"""
Error classifier for client result-handler invocations.

Normalizes ``(result, error)`` into a :data:`CallbackOutcome`. The check order
is fixed: a transport error wins over any partial result, application errors
win over data, and a call carrying nothing at all is a client contract
violation.
"""
from __future__ import annotations

import logging
from typing import Optional

from .logging import LogContext, get_logger, log_event
from .models import GraphQLResult
from .outcome import ApplicationFailure, CallbackOutcome, Success, TransportFailure, UnknownOutcome

_logger = get_logger("graphql_rx.classifier")


def classify_outcome(
    result: Optional[GraphQLResult],
    error: Optional[BaseException],
    ctx: LogContext | None = None,
) -> CallbackOutcome:
    """Classify one result-handler invocation.

    Parameters
    ----------
    result:
        Result passed to the handler, if any.
    error:
        Transport error passed to the handler, if any.
    ctx:
        Optional subscription context for the contract-violation warning.
    """
    if error is not None:
        return TransportFailure(error)
    if result is not None and result.errors:
        return ApplicationFailure(tuple(result.errors))
    if result is not None:
        return Success(result.data)
    log_event(_logger, "classifier.unknown", ctx, level=logging.WARNING)
    return UnknownOutcome()


__all__ = ["classify_outcome"]
