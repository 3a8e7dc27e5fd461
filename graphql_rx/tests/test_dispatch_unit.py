"""Dispatch contexts: inline, executor and asyncio delivery."""
from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

from graphql_rx.base.dispatch import AsyncioDispatch, DispatchContext, ExecutorDispatch, ImmediateDispatch
from graphql_rx.base.models import CachePolicy
from graphql_rx.base.streaming import fetch_single, watch_observable
from graphql_rx.tests.utils import COUNTER_QUERY, HERO_QUERY


def test_contexts_satisfy_protocol():
    with ThreadPoolExecutor(max_workers=1) as pool:
        for ctx in (ImmediateDispatch(), ExecutorDispatch(pool)):
            assert isinstance(ctx, DispatchContext)  # nosec B101


def test_immediate_runs_inline():
    seen = []
    ImmediateDispatch().dispatch(lambda: seen.append(threading.get_ident()))
    assert seen == [threading.get_ident()]  # nosec B101


def test_executor_dispatch_delivers_on_worker_thread(memory_client):
    memory_client.set_response(HERO_QUERY, {"hero": {"name": "A"}})
    threads = []
    done = threading.Event()

    def on_success(value):
        threads.append(threading.get_ident())
        done.set()

    with ThreadPoolExecutor(max_workers=1) as pool:
        fetch_single(memory_client, HERO_QUERY, dispatch=ExecutorDispatch(pool)).subscribe(on_success)
        assert done.wait(2)  # nosec B101
    assert threads and threads[0] != threading.get_ident()  # nosec B101


def test_single_worker_executor_preserves_watch_order(memory_client):
    memory_client.write(COUNTER_QUERY, {"v": 0})
    values = []
    done = threading.Event()

    def on_next(value):
        values.append(value["v"])
        if value["v"] == 3:
            done.set()

    with ThreadPoolExecutor(max_workers=1) as pool:
        sub = watch_observable(
            memory_client, COUNTER_QUERY, CachePolicy.RETURN_CACHE_DATA_DONT_FETCH, ExecutorDispatch(pool)
        ).subscribe(on_next)
        for v in (1, 2, 3):
            memory_client.write(COUNTER_QUERY, {"v": v})
        assert done.wait(2)  # nosec B101
        sub.dispose()
    assert values == [0, 1, 2, 3]  # nosec B101


def test_executor_handler_errors_are_contained():
    with ThreadPoolExecutor(max_workers=1) as pool:
        ExecutorDispatch(pool).dispatch(lambda: 1 / 0)
        ran = pool.submit(lambda: True)
        assert ran.result(2) is True  # nosec B101


def test_asyncio_dispatch_runs_on_loop_thread():
    async def main():
        loop_thread = threading.get_ident()
        ctx = AsyncioDispatch()
        seen = asyncio.Event()
        threads = []

        def record():
            threads.append(threading.get_ident())
            seen.set()

        worker = threading.Thread(target=ctx.dispatch, args=(record,))
        worker.start()
        worker.join()
        await asyncio.wait_for(seen.wait(), 2)
        assert ctx.loop is asyncio.get_running_loop()  # nosec B101
        return loop_thread, threads

    loop_thread, threads = asyncio.run(main())
    assert threads == [loop_thread]  # nosec B101
