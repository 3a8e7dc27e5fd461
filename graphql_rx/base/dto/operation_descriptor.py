"""Typed descriptor for one bridged client call.

Purpose
-------
Capture which primitive to call (fetch, watch, perform), the operation
payload and the call-time options in one immutable object, validated before
anything is registered with the client.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and immutability.

Failure modes
-------------
- ``pydantic.ValidationError`` when the operation type does not match the
  kind (a mutation cannot be fetched or watched) or when a cache policy is
  given for ``perform``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..dispatch import DispatchContext
from ..models import CachePolicy, GraphQLMutation, GraphQLOperation, GraphQLQuery


class OperationKind(str, Enum):
    """Client primitive a descriptor targets."""

    FETCH = "fetch"
    WATCH = "watch"
    PERFORM = "perform"


class OperationDescriptor(BaseModel):
    """Immutable description of one fetch/watch/perform call.

    Attributes
    ----------
    kind:
        Client primitive to invoke.
    operation:
        ``GraphQLQuery`` for fetch/watch, ``GraphQLMutation`` for perform.
    cache_policy:
        Required for fetch/watch, must be ``None`` for perform.
    dispatch:
        Context the client uses to invoke the result handler.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: OperationKind
    operation: Any
    cache_policy: Optional[CachePolicy] = None
    dispatch: Any

    @field_validator("operation")
    @classmethod
    def _check_operation(cls, value: Any) -> Any:
        if not isinstance(value, GraphQLOperation):
            raise ValueError(f"operation must be a GraphQLOperation, got {type(value).__name__}")
        return value

    @field_validator("dispatch")
    @classmethod
    def _check_dispatch(cls, value: Any) -> Any:
        if not isinstance(value, DispatchContext):
            raise ValueError(f"dispatch must provide dispatch(fn), got {type(value).__name__}")
        return value

    @model_validator(mode="after")
    def _check_shape(self) -> "OperationDescriptor":
        if self.kind is OperationKind.PERFORM:
            if not isinstance(self.operation, GraphQLMutation):
                raise ValueError("perform requires a GraphQLMutation")
            if self.cache_policy is not None:
                raise ValueError("perform does not take a cache policy")
        else:
            if not isinstance(self.operation, GraphQLQuery):
                raise ValueError(f"{self.kind.value} requires a GraphQLQuery")
            if self.cache_policy is None:
                raise ValueError(f"{self.kind.value} requires a cache policy")
        return self

    @property
    def operation_name(self) -> Optional[str]:
        return self.operation.operation_name

    def log_fields(self) -> Dict[str, Any]:
        """Return the descriptor fields relevant to structured logging."""
        return {
            "operation_name": self.operation.operation_name,
            "operation_type": self.operation.operation_type.value,
            "cache_policy": self.cache_policy.value if self.cache_policy else None,
        }


__all__ = ["OperationDescriptor", "OperationKind"]
