"""Dispatch contexts (public facade): where client result handlers run."""

from .dispatch_parts import AsyncioDispatch, DispatchContext, ExecutorDispatch, ImmediateDispatch

__all__ = ["AsyncioDispatch", "DispatchContext", "ExecutorDispatch", "ImmediateDispatch"]
