"""Cancellation parts; prefer ``graphql_rx.base.cancellation``."""

from .cancellable import Cancellable
from .guarded_cancel import GuardedCancel

__all__ = ["Cancellable", "GuardedCancel"]
