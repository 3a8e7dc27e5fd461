"""Reactive facade: defaults, counters and type checks."""
from __future__ import annotations

import pytest

from graphql_rx import ReactiveClient, rx
from graphql_rx.base.dispatch import ImmediateDispatch
from graphql_rx.base.models import CachePolicy, GraphQLResult
from graphql_rx.config import BridgeConfig
from graphql_rx.config.env import CACHE_POLICY_ENV
from graphql_rx.tests.utils import COUNTER_QUERY, HERO_QUERY, RENAME_MUTATION


def test_rejects_objects_without_client_primitives():
    with pytest.raises(TypeError):
        ReactiveClient(object())


def test_default_policy_comes_from_config(monkeypatch, scripted_client):
    monkeypatch.setenv(CACHE_POLICY_ENV, "fetch-ignoring-cache-data")
    rx(scripted_client).fetch(HERO_QUERY).subscribe()
    assert scripted_client.last.cache_policy is CachePolicy.FETCH_IGNORING_CACHE_DATA  # nosec B101


def test_explicit_config_and_policy_win(scripted_client):
    client = rx(scripted_client, config=BridgeConfig(default_cache_policy=CachePolicy.RETURN_CACHE_DATA_AND_FETCH))
    client.watch(COUNTER_QUERY).subscribe()
    assert scripted_client.last.cache_policy is CachePolicy.RETURN_CACHE_DATA_AND_FETCH  # nosec B101
    client.fetch(HERO_QUERY, CachePolicy.RETURN_CACHE_DATA_DONT_FETCH).subscribe()
    assert scripted_client.last.cache_policy is CachePolicy.RETURN_CACHE_DATA_DONT_FETCH  # nosec B101


def test_dispatch_default_and_override(scripted_client):
    shared = ImmediateDispatch()
    client = rx(scripted_client, dispatch=shared)
    client.perform(RENAME_MUTATION).subscribe()
    assert scripted_client.last.dispatch is shared  # nosec B101
    own = ImmediateDispatch()
    client.perform(RENAME_MUTATION, own).subscribe()
    assert scripted_client.last.dispatch is own  # nosec B101


def test_counters_shared_across_calls(scripted_client):
    client = rx(scripted_client)
    client.fetch(HERO_QUERY).subscribe()
    watch = client.watch(COUNTER_QUERY).subscribe()
    scripted_client.registrations[0].fire(GraphQLResult(data={"ok": 1}))
    scripted_client.registrations[1].fire(GraphQLResult(data={"v": 1}))
    watch.dispose()
    snap = client.counters.snapshot()
    assert snap.subscribed == 2 and snap.success == 1 and snap.emitted == 1  # nosec B101
    assert snap.in_flight == 0  # nosec B101


def test_facade_streams_are_cold(scripted_client):
    single = rx(scripted_client).fetch(HERO_QUERY)
    assert scripted_client.registrations == []  # nosec B101
    single.subscribe()
    single.subscribe()
    assert len(scripted_client.registrations) == 2  # nosec B101
