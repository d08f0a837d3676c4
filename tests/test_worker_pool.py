import threading
import time

import pytest

from graph_query.errors import PoolClosedError
from graph_query.search import BoundedWorkerPool, ShutdownMode


def test_results_arrive_in_completion_order():
    release_slow = threading.Event()

    def slow():
        release_slow.wait(timeout=5)
        return "slow"

    def fast():
        return "fast"

    with BoundedWorkerPool(2) as pool:
        pool.submit(slow)
        pool.submit(fast)
        first = pool.await_any(timeout=5)
        release_slow.set()
        second = pool.await_any(timeout=5)

    assert first.value == "fast"
    assert second.value == "slow"


def test_outstanding_counts_undelivered_completions():
    with BoundedWorkerPool(2) as pool:
        pool.submit(lambda: 1)
        pool.submit(lambda: 2)
        assert pool.submitted == 2
        values = set()
        while pool.outstanding:
            values.add(pool.await_any(timeout=5).value)
    assert values == {1, 2}


def test_await_any_times_out_with_none():
    gate = threading.Event()
    with BoundedWorkerPool(1) as pool:
        pool.submit(gate.wait, 5)
        assert pool.await_any(timeout=0.05) is None
        assert pool.outstanding == 1
        gate.set()


def test_unit_error_is_captured_and_siblings_keep_running():
    def boom():
        raise RuntimeError("shard exploded")

    with BoundedWorkerPool(2) as pool:
        pool.submit(boom)
        pool.submit(lambda: "ok")
        completions = [pool.await_any(timeout=5) for _ in range(2)]
        pool.submit(lambda: "still alive")
        after = pool.await_any(timeout=5)

    errors = [c for c in completions if not c.ok]
    assert len(errors) == 1
    assert isinstance(errors[0].error, RuntimeError)
    assert any(c.value == "ok" for c in completions if c.ok)
    assert after.value == "still alive"


def test_completion_carries_the_submitted_future():
    with BoundedWorkerPool(2) as pool:
        handles = {pool.submit(lambda n=n: n * 10): n for n in range(3)}
        completions = [pool.await_any(timeout=5) for _ in range(3)]

    assert {handles[c.future] for c in completions} == {0, 1, 2}
    assert all(c.value == handles[c.future] * 10 for c in completions)


def test_submit_after_shutdown_is_rejected():
    pool = BoundedWorkerPool(2)
    pool.shutdown(ShutdownMode.GRACEFUL)
    assert pool.closed
    with pytest.raises(PoolClosedError):
        pool.submit(lambda: None)


def test_graceful_shutdown_lets_in_flight_work_finish():
    pool = BoundedWorkerPool(1)
    pool.submit(time.sleep, 0.05)
    pool.submit(lambda: "queued")
    pool.shutdown(ShutdownMode.GRACEFUL)
    values = [pool.await_any(timeout=1) for _ in range(2)]
    assert all(completion.ok for completion in values)
    assert "queued" in [completion.value for completion in values]


def test_immediate_shutdown_raises_cancellation_and_drops_queue():
    started = threading.Event()
    observed = []

    def cooperative():
        started.set()
        while not pool.cancelled:
            time.sleep(0.01)
        observed.append("stopped")

    pool = BoundedWorkerPool(1)
    pool.submit(cooperative)
    pool.submit(lambda: "never")
    started.wait(timeout=5)
    pool.shutdown(ShutdownMode.IMMEDIATE)

    assert pool.cancelled
    assert observed == ["stopped"]
    completions = [pool.await_any(timeout=1) for _ in range(2)]
    assert any(not completion.ok for completion in completions)


def test_rejects_non_positive_worker_count():
    with pytest.raises(ValueError):
        BoundedWorkerPool(0)
