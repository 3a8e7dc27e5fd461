"""Pytest configuration for the bridge test-suite.

Bridge configuration is process-cached; the autouse fixture below clears it
and the related environment variables so tests cannot leak settings.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from graphql_rx.base.metrics import BridgeCounters
from graphql_rx.config import reset_bridge_config
from graphql_rx.config.env import CACHE_POLICY_ENV, CONFIG_FILE_ENV, TIMEOUT_SECONDS_ENV
from graphql_rx.mock import InMemoryGraphQLClient

from graphql_rx.tests.utils import Recorder, ScriptedClient


@pytest.fixture(autouse=True)
def isolated_bridge_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached config and bridge env vars around every test."""
    for name in (CACHE_POLICY_ENV, CONFIG_FILE_ENV, TIMEOUT_SECONDS_ENV):
        monkeypatch.delenv(name, raising=False)
    reset_bridge_config()
    yield
    reset_bridge_config()


@pytest.fixture()
def memory_client() -> InMemoryGraphQLClient:
    return InMemoryGraphQLClient()


@pytest.fixture()
def deferred_client() -> InMemoryGraphQLClient:
    """In-memory client that queues all work until ``flush()``."""
    return InMemoryGraphQLClient(deferred=True)


@pytest.fixture()
def scripted_client() -> ScriptedClient:
    return ScriptedClient()


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def counters() -> BridgeCounters:
    return BridgeCounters()
