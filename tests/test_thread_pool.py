import threading
import time

import pytest

from drillbox.thread_pool import (
    MultiQueueThreadPool,
    ThreadPool,
    WorkStealingThreadPool,
    main,
)


def _all_pools(num_threads):
    return [
        ThreadPool(num_threads),
        MultiQueueThreadPool(num_threads),
        WorkStealingThreadPool(num_threads),
    ]


def test_results_of_all_tasks_are_returned():
    for pool in (ThreadPool(4), MultiQueueThreadPool(4), WorkStealingThreadPool(4)):
        with pool:
            futures = [pool.submit(lambda x: x * x, i) for i in range(50)]
            results = [f.result(timeout=10) for f in futures]
        assert results == [i * i for i in range(50)]


def test_keyword_arguments_are_passed():
    for pool in (ThreadPool(2), MultiQueueThreadPool(2), WorkStealingThreadPool(2)):
        with pool:
            future = pool.submit(lambda a, b=0: (a, b), "left", b="right")
            assert future.result(timeout=10) == ("left", "right")


def test_exception_is_delivered_through_future():
    def fail():
        raise KeyError("missing")

    for pool in (ThreadPool(2), MultiQueueThreadPool(2), WorkStealingThreadPool(2)):
        with pool:
            future = pool.submit(fail)
            with pytest.raises(KeyError):
                future.result(timeout=10)


def test_submit_after_shutdown_raises():
    for pool in (ThreadPool(2), MultiQueueThreadPool(2), WorkStealingThreadPool(2)):
        pool.shutdown()
        with pytest.raises(RuntimeError):
            pool.submit(print)


def test_shutdown_drains_pending_tasks():
    for pool in (ThreadPool(2), MultiQueueThreadPool(2), WorkStealingThreadPool(2)):
        done = []
        lock = threading.Lock()

        def slow(i):
            time.sleep(0.01)
            with lock:
                done.append(i)

        futures = [pool.submit(slow, i) for i in range(20)]
        pool.shutdown()
        assert sorted(done) == list(range(20))
        assert all(f.done() for f in futures)


def test_zero_threads_rejected():
    with pytest.raises(ValueError):
        ThreadPool(0)
    with pytest.raises(ValueError):
        MultiQueueThreadPool(0)
    with pytest.raises(ValueError):
        WorkStealingThreadPool(0)


def test_tasks_run_concurrently():
    for pool in (ThreadPool(2), WorkStealingThreadPool(2)):
        barrier = threading.Barrier(2, timeout=5)

        def meet():
            return barrier.wait()

        with pool:
            futures = [pool.submit(meet) for _ in range(2)]
            arrivals = sorted(f.result(timeout=10) for f in futures)
        assert arrivals == [0, 1]


def test_shutdown_is_repeatable():
    pool = ThreadPool(3)
    future = pool.submit(sum, [1, 2, 3])
    pool.shutdown()
    pool.shutdown()
    assert future.result(timeout=1) == 6


def test_context_manager_returns_pool_and_shuts_down():
    for pool in _all_pools(1):
        with pool as entered:
            assert entered is pool
        with pytest.raises(RuntimeError):
            pool.submit(print)


def test_main_runs_ten_tasks(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    numbers = sorted(int(line.split()[1]) for line in lines)
    assert numbers == list(range(10))
    assert all(" executed by thread " in line for line in lines)