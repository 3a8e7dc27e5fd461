"""Subscription sink rules: terminal-once, dispose from other threads, consumer errors."""
from __future__ import annotations

import threading

import pytest

from graphql_rx.base.streaming import Disposable, Observable, ObservableSubscription, Single


def test_next_after_dispose_on_another_thread_is_dropped():
    seen = []
    sink = ObservableSubscription(seen.append)
    assert sink.next(1) is True  # nosec B101
    worker = threading.Thread(target=sink.dispose)
    worker.start()
    worker.join()
    assert sink.next(2) is False  # nosec B101
    assert seen == [1]  # nosec B101


def test_dispose_from_within_on_next_stops_further_values():
    seen = []
    holder = {}

    def on_next(value):
        seen.append(value)
        holder["sink"].dispose()

    sink = ObservableSubscription(on_next)
    holder["sink"] = sink
    sink.next("a")
    assert sink.next("b") is False and seen == ["a"]  # nosec B101


def test_raising_on_next_disposes_subscription_and_propagates():
    released = []
    sink = ObservableSubscription(lambda _v: 1 / 0)
    sink.set_action(lambda: released.append(True))
    with pytest.raises(ZeroDivisionError):
        sink.next("x")
    assert sink.disposed and released == [True]  # nosec B101
    assert sink.next("y") is False  # nosec B101


def test_no_events_after_terminal_event():
    events = []
    sink = ObservableSubscription(events.append, events.append, lambda: events.append("done"))
    sink.completed()
    sink.next(1)
    sink.error(RuntimeError("late"))
    assert events == ["done"]  # nosec B101


def test_consumer_raising_while_starting_propagates_from_subscribe():
    def emit_now(sink):
        sink.next(1)
        return Disposable()

    def succeed_now(sink):
        sink.success(1)
        return Disposable()

    def explode(_value):
        raise KeyError("consumer")

    with pytest.raises(KeyError):
        Observable(emit_now).subscribe(explode)
    with pytest.raises(KeyError):
        Single(succeed_now).subscribe(explode)


def test_subscribe_function_failure_still_becomes_stream_error():
    errors = []

    def broken(_sink):
        raise ValueError("cannot start")

    sub = Single(broken).subscribe(None, errors.append)
    assert isinstance(errors[0], ValueError) and sub.disposed  # nosec B101
