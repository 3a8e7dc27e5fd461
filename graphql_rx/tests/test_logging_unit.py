"""Structured logging: level control, JSON payloads and bridge events."""

from __future__ import annotations

import io
import json
import logging
from typing import Iterator, List

import pytest

from graphql_rx.base.log_support import JsonFormatter
from graphql_rx.base.logging import (
    BASE_LOGGER_NAME,
    LOG_LEVEL_ENV,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
)
from graphql_rx.base.models import GraphQLResult
from graphql_rx.base.streaming import fetch_single
from graphql_rx.tests.utils import HERO_QUERY


@pytest.fixture()
def captured() -> Iterator[io.StringIO]:
    """Route the shared logger into a buffer at DEBUG; restore afterwards."""
    base_logger = get_logger()
    saved_handlers, saved_level = list(base_logger.handlers), base_logger.level
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    base_logger.handlers[:] = [handler]
    base_logger.setLevel(logging.DEBUG)
    yield stream
    base_logger.handlers[:] = saved_handlers
    base_logger.setLevel(saved_level)


def _events(stream: io.StringIO) -> List[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


def test_get_logger_env_overrides_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    logger = get_logger(name="graphql_rx.test", json_mode=True, level=logging.DEBUG)
    assert logging.getLogger(BASE_LOGGER_NAME).level == logging.ERROR  # nosec B101 - asserts are appropriate in unit tests
    assert not logger.isEnabledFor(logging.INFO) and logger.isEnabledFor(logging.ERROR)  # nosec B101
    monkeypatch.setenv(LOG_LEVEL_ENV, "not-a-level")
    get_logger()
    assert logger.isEnabledFor(logging.INFO)  # nosec B101 - unknown names fall back to INFO


def test_log_event_merges_context_and_drops_none(captured):
    logger = get_logger("graphql_rx.test.event")
    ctx = LogContext(operation_name="Hero", operation_type="query", extra={"attempt": 1, "skip": None})
    log_event(logger, "bridge.subscribe", ctx, kind="fetch", error_code=None)
    (payload,) = _events(captured)
    assert payload == {  # nosec B101
        "event": "bridge.subscribe",
        "operation_name": "Hero",
        "operation_type": "query",
        "attempt": 1,
        "kind": "fetch",
    }


def test_log_event_keep_none_and_disabled_level(captured):
    logger = get_logger("graphql_rx.test.none")
    log_event(logger, "x", keep_none=True, error=None)
    logging.getLogger(BASE_LOGGER_NAME).setLevel(logging.ERROR)
    log_event(logger, "suppressed", level=logging.INFO)
    (payload,) = _events(captured)
    assert payload == {"event": "x", "error": None}  # nosec B101


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="graphql_rx.test.json",
        level=logging.WARNING,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "classifier.unknown", "subscription_id": "abc"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["event"] == "classifier.unknown"  # nosec B101 - validates hoisting
    assert payload["subscription_id"] == "abc" and payload["level"] == "WARNING"  # nosec B101


def test_bridge_lifecycle_events_share_subscription_id(captured, scripted_client):
    fetch_single(scripted_client, HERO_QUERY).subscribe(None, lambda _e: None)
    scripted_client.last.fire(error=ConnectionError("down"))
    scripted_client.last.fire(GraphQLResult(data={}))

    events = _events(captured)
    names = [e["event"] for e in events]
    assert names == ["bridge.subscribe", "bridge.failure", "bridge.dispose", "bridge.late_callback"]  # nosec B101
    assert len({e["subscription_id"] for e in events}) == 1  # nosec B101
    failure = events[1]
    assert failure["error_code"] == "transport" and failure["operation_name"] == "Hero"  # nosec B101
    assert failure["cache_policy"] == "return_cache_data_else_fetch" and failure["kind"] == "fetch"  # nosec B101


def test_unknown_outcome_is_logged_as_warning(captured, scripted_client):
    fetch_single(scripted_client, HERO_QUERY).subscribe(lambda _v: None, lambda _e: None)
    scripted_client.last.fire(None, None)
    assert "classifier.unknown" in [e["event"] for e in _events(captured)]  # nosec B101


def test_configure_logger_writes_rotating_file(tmp_path):
    target = tmp_path / "logs" / "bridge.log"
    logger = configure_logger(level="INFO", file_path=str(target))
    try:
        log_event(get_logger("graphql_rx.test.file"), "file.event", value=3)
        for h in logger.handlers:
            h.flush()
        lines = target.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["event"] == "file.event"  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "baseFilename", None) for h in logger.handlers)  # nosec B101


def test_log_context_bind_returns_extended_copy():
    base = LogContext(operation_name="Hero", subscription_id="s1")
    bound = base.bind(kind="watch", attempt=None)
    assert base.to_dict() == {"operation_name": "Hero", "subscription_id": "s1"}  # nosec B101
    assert bound.to_dict() == {"operation_name": "Hero", "subscription_id": "s1", "kind": "watch"}  # nosec B101
    with pytest.raises(AttributeError):
        bound.operation_name = "Other"  # type: ignore[misc]
