"""End-to-end scenarios against the in-memory client."""
from __future__ import annotations

import pytest

from graphql_rx import GraphQLErrorsFailure, rx
from graphql_rx.base.models import CachePolicy, GraphQLError, GraphQLQuery, GraphQLResult
from graphql_rx.tests.utils import COUNTER_QUERY, RENAME_MUTATION, Recorder, assert_true

NAME_QUERY = GraphQLQuery("query Name { name }", operation_name="Name")

pytestmark = pytest.mark.integration


def test_fetch_empty_cache_resolves_once_from_network(memory_client, recorder):
    memory_client.set_response(NAME_QUERY, {"name": "A"})
    rx(memory_client).fetch(NAME_QUERY, CachePolicy.RETURN_CACHE_DATA_ELSE_FETCH).subscribe(
        recorder.on_success, recorder.on_error
    )
    assert_true(recorder.events == [("success", {"name": "A"})], f"events: {recorder.events}")
    assert memory_client.requests == [NAME_QUERY]  # nosec B101


def test_watch_emits_two_values_then_fails_with_transport_cause(memory_client, recorder):
    memory_client.set_response(COUNTER_QUERY, {"v": 1})
    sub = rx(memory_client).watch(COUNTER_QUERY).subscribe(recorder.on_next, recorder.on_error, recorder.on_completed)
    memory_client.write(COUNTER_QUERY, {"v": 2})
    cause = ConnectionError("disconnected")
    memory_client.push(COUNTER_QUERY, error=cause)
    memory_client.write(COUNTER_QUERY, {"v": 3})

    assert recorder.events == [("next", {"v": 1}), ("next", {"v": 2}), ("error", cause)]  # nosec B101
    assert recorder.errors[0] is cause  # nosec B101
    assert sub.disposed and memory_client.watcher_count() == 0  # nosec B101


def test_perform_with_application_errors_fails_with_all_errors(memory_client):
    e1, e2 = GraphQLError("E1"), GraphQLError("E2")
    memory_client.respond(RENAME_MUTATION, GraphQLResult(data=None, errors=[e1, e2]))
    recorder = Recorder()
    rx(memory_client).perform(RENAME_MUTATION).subscribe(recorder.on_success, recorder.on_error)
    (exc,) = recorder.errors
    assert isinstance(exc, GraphQLErrorsFailure) and exc.errors == (e1, e2)  # nosec B101
    assert recorder.values == []  # nosec B101
