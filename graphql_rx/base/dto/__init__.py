"""Typed DTOs used at the bridge boundary."""

from .operation_descriptor import OperationDescriptor, OperationKind

__all__ = ["OperationDescriptor", "OperationKind"]
