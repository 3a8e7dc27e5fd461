"""Streaming package: stream primitives, operators and the client bridge."""

from .disposable import Disposable
from .single import Single, SingleSubscription
from .observable import Observable, ObservableSubscription
from .operators import first, take, timeout_single
from .async_support import ObservableAsyncIterator
from .bridge import (
    Data,
    continuous,
    fetch_single,
    one_shot,
    perform_single,
    watch_observable,
)

__all__ = [
    "Disposable",
    "Single",
    "SingleSubscription",
    "Observable",
    "ObservableSubscription",
    "ObservableAsyncIterator",
    "first",
    "take",
    "timeout_single",
    "Data",
    "one_shot",
    "continuous",
    "fetch_single",
    "perform_single",
    "watch_observable",
]
