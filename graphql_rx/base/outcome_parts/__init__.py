"""Callback outcome variants; prefer ``graphql_rx.base.outcome``."""

from .application_failure import ApplicationFailure
from .success import Success
from .transport_failure import TransportFailure
from .unknown_outcome import UnknownOutcome

__all__ = ["ApplicationFailure", "Success", "TransportFailure", "UnknownOutcome"]
