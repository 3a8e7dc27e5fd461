"""Callback outcome tagged union.

Every invocation of a client result handler maps to exactly one of these
variants. ``is_failure`` and ``to_exception()`` let the bridge treat them
uniformly.
"""

from typing import Union

from .outcome_parts import ApplicationFailure, Success, TransportFailure, UnknownOutcome

CallbackOutcome = Union[TransportFailure, ApplicationFailure, Success, UnknownOutcome]

__all__ = [
    "CallbackOutcome",
    "TransportFailure",
    "ApplicationFailure",
    "Success",
    "UnknownOutcome",
]
