"""Shared test doubles for the bridge test-suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from graphql_rx.base.models import CachePolicy, GraphQLMutation, GraphQLQuery, GraphQLResult


class CountingHandle:
    """Cancel handle counting every ``cancel`` call."""

    def __init__(self) -> None:
        self.cancel_count = 0

    def cancel(self) -> None:
        self.cancel_count += 1


@dataclass
class Registration:
    """One primitive call observed by :class:`ScriptedClient`."""

    kind: str
    operation: Any
    cache_policy: Optional[CachePolicy]
    dispatch: Any
    handler: Any
    handle: CountingHandle = field(default_factory=CountingHandle)

    def fire(self, result: Optional[GraphQLResult] = None, error: Optional[BaseException] = None) -> None:
        """Invoke the registered handler through its dispatch context."""
        self.dispatch.dispatch(lambda: self.handler(result, error))


class ScriptedClient:
    """Client that records registrations and lets tests fire callbacks by hand.

    ``raise_on_register`` makes every primitive raise instead of returning a
    handle; ``inline`` is a list of ``(result, error)`` pairs invoked
    synchronously inside the primitive before the handle is returned.
    """

    def __init__(
        self,
        *,
        raise_on_register: Optional[BaseException] = None,
        inline: Optional[List[Tuple[Optional[GraphQLResult], Optional[BaseException]]]] = None,
    ) -> None:
        self.registrations: List[Registration] = []
        self._raise = raise_on_register
        self._inline = list(inline or [])

    def _record(self, kind, operation, cache_policy, dispatch, handler) -> CountingHandle:
        if self._raise is not None:
            raise self._raise
        reg = Registration(kind, operation, cache_policy, dispatch, handler)
        self.registrations.append(reg)
        for result, error in self._inline:
            reg.fire(result, error)
        return reg.handle

    def fetch(self, query: GraphQLQuery, cache_policy, dispatch, handler) -> CountingHandle:
        return self._record("fetch", query, cache_policy, dispatch, handler)

    def watch(self, query: GraphQLQuery, cache_policy, dispatch, handler) -> CountingHandle:
        return self._record("watch", query, cache_policy, dispatch, handler)

    def perform(self, mutation: GraphQLMutation, dispatch, handler) -> CountingHandle:
        return self._record("perform", mutation, None, dispatch, handler)

    @property
    def last(self) -> Registration:
        return self.registrations[-1]


class Recorder:
    """Collects stream events as ``(kind, payload)`` tuples in arrival order."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def on_success(self, value: Any) -> None:
        self.events.append(("success", value))

    def on_next(self, value: Any) -> None:
        self.events.append(("next", value))

    def on_error(self, exc: BaseException) -> None:
        self.events.append(("error", exc))

    def on_completed(self) -> None:
        self.events.append(("completed", None))

    @property
    def values(self) -> List[Any]:
        return [payload for kind, payload in self.events if kind in ("success", "next")]

    @property
    def errors(self) -> List[BaseException]:
        return [payload for kind, payload in self.events if kind == "error"]


HERO_QUERY = GraphQLQuery("query Hero { hero { name } }", operation_name="Hero")
COUNTER_QUERY = GraphQLQuery("query Counter { v }", operation_name="Counter")
RENAME_MUTATION = GraphQLMutation(
    "mutation Rename($name: String!) { rename(name: $name) { name } }",
    variables={"name": "B"},
    operation_name="Rename",
)


def assert_true(condition: bool, message: str) -> None:
    """Raise ``AssertionError`` with ``message`` when ``condition`` is false."""
    if not condition:
        raise AssertionError(message)
