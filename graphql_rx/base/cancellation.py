"""Cancel handle primitives (public API facade).

- ``Cancellable`` is the contract of the handle returned by the underlying
  client's ``fetch``/``watch``/``perform``.
- ``GuardedCancel`` wraps such a handle so it is invoked at most once.
"""

from .cancellation_parts.cancellable import Cancellable
from .cancellation_parts.guarded_cancel import GuardedCancel

__all__ = ["Cancellable", "GuardedCancel"]
