"""Unit tests for the callback outcome classifier.

Covers the fixed priority order: transport error, then application errors,
then result presence, then the contract-violation fallback.
"""
from __future__ import annotations

import logging

import pytest

from graphql_rx.base.classifier import classify_outcome
from graphql_rx.base.errors import GraphQLErrorsFailure, UnknownFailure
from graphql_rx.base.models import GraphQLError, GraphQLResult
from graphql_rx.base.outcome import ApplicationFailure, Success, TransportFailure, UnknownOutcome

E1 = GraphQLError("first", path=("hero",))
E2 = GraphQLError("second", path=("hero", "name"))


@pytest.mark.parametrize(
    "result",
    [
        None,
        GraphQLResult(data={"name": "A"}),
        GraphQLResult(data=None, errors=[E1]),
        GraphQLResult(data={"name": "A"}, errors=[E1, E2]),
    ],
)
def test_transport_error_wins_over_any_result(result):
    cause = ConnectionError("offline")
    outcome = classify_outcome(result, cause)
    assert isinstance(outcome, TransportFailure)  # nosec B101 - pytest assert in tests
    assert outcome.cause is cause  # nosec B101
    assert outcome.to_exception() is cause  # nosec B101


def test_application_errors_are_kept_complete_and_ordered():
    errors = [E2, E1, E2]
    outcome = classify_outcome(GraphQLResult(data={"partial": True}, errors=errors), None)
    assert isinstance(outcome, ApplicationFailure)  # nosec B101
    assert outcome.errors == (E2, E1, E2)  # nosec B101
    exc = outcome.to_exception()
    assert isinstance(exc, GraphQLErrorsFailure)  # nosec B101
    assert list(exc.errors) == errors  # nosec B101


@pytest.mark.parametrize("errors", [None, []])
def test_result_without_errors_is_success(errors):
    outcome = classify_outcome(GraphQLResult(data={"name": "A"}, errors=errors), None)
    assert outcome == Success({"name": "A"})  # nosec B101
    assert outcome.is_failure is False  # nosec B101
    assert outcome.to_exception() is None  # nosec B101


def test_result_with_null_data_is_success_with_none():
    outcome = classify_outcome(GraphQLResult(data=None), None)
    assert isinstance(outcome, Success)  # nosec B101
    assert outcome.data is None  # nosec B101


def test_nothing_at_all_is_unknown_and_warns(caplog):
    base = logging.getLogger("graphql_rx")
    base.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger="graphql_rx"):
            outcome = classify_outcome(None, None)
    finally:
        base.removeHandler(caplog.handler)
    assert isinstance(outcome, UnknownOutcome)  # nosec B101
    assert isinstance(outcome.to_exception(), UnknownFailure)  # nosec B101
    assert any("classifier.unknown" in rec.getMessage() for rec in caplog.records)  # nosec B101
