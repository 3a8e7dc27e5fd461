"""Dispatch context parts; prefer ``graphql_rx.base.dispatch``."""

from .asyncio_dispatch import AsyncioDispatch
from .dispatch_context import DispatchContext
from .executor_dispatch import ExecutorDispatch
from .immediate_dispatch import ImmediateDispatch

__all__ = ["AsyncioDispatch", "DispatchContext", "ExecutorDispatch", "ImmediateDispatch"]
