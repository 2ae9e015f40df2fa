"""Fixed-size thread pools: one shared queue, per-worker queues, and work stealing."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Deque, Optional

_Task = Callable[[], None]


def _check_size(num_threads: int) -> None:
    if num_threads < 1:
        raise ValueError(f"a pool needs at least one thread, got {num_threads}")


def _make_task(fn: Callable[..., Any], args: tuple, kwargs: dict) -> tuple[Future, _Task]:
    future: Future = Future()

    def run() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = fn(*args, **kwargs)
        except BaseException as exc:  # delivered to whoever waits on the future
            future.set_exception(exc)
        else:
            future.set_result(result)

    return future, run


class ThreadPool:
    """A pool whose workers all take tasks from one shared FIFO queue."""

    def __init__(self, num_threads: int) -> None:
        _check_size(num_threads)
        self._tasks: Deque[_Task] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{i}", daemon=True)
            for i in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or self._tasks)
                if not self._tasks:
                    return
                task = self._tasks.popleft()
            task()

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future, task = _make_task(fn, args, kwargs)
        with self._condition:
            if self._stop:
                raise RuntimeError("submit on stopped ThreadPool")
            self._tasks.append(task)
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, let the workers drain the queue, and join them."""
        with self._condition:
            self._stop = True
            self._condition.notify_all()
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()


@dataclass
class _LocalQueue:
    tasks: Deque[_Task] = field(default_factory=deque)
    condition: threading.Condition = field(default_factory=threading.Condition)


class MultiQueueThreadPool:
    """A pool where each worker owns a queue and tasks go to a random one."""

    def __init__(self, num_threads: int) -> None:
        _check_size(num_threads)
        self._queues = [_LocalQueue() for _ in range(num_threads)]
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, args=(i,), name=f"pool-worker-{i}", daemon=True)
            for i in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self, index: int) -> None:
        own = self._queues[index]
        while True:
            with own.condition:
                own.condition.wait_for(lambda: self._stop or own.tasks)
                if not own.tasks:
                    return
                task = own.tasks.popleft()
            task()

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` on a randomly chosen worker's queue."""
        future, task = _make_task(fn, args, kwargs)
        queue = random.choice(self._queues)
        with queue.condition:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            queue.tasks.append(task)
            queue.condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, let each worker drain its queue, and join them."""
        for queue in self._queues:
            with queue.condition:
                self._stop = True
                queue.condition.notify_all()
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> MultiQueueThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()


class WorkStealingThreadPool:
    """A pool of per-worker deques where idle workers steal from the back of others."""

    _STEAL_BACKOFF = 0.2
    _IDLE_WAIT = 0.01

    def __init__(self, num_threads: int) -> None:
        _check_size(num_threads)
        self._queues = [_LocalQueue() for _ in range(num_threads)]
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, args=(i,), name=f"pool-worker-{i}", daemon=True)
            for i in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def _steal(self, index: int) -> Optional[_Task]:
        others = [queue for i, queue in enumerate(self._queues) if i != index]
        if not others:
            return None
        victim = random.choice(others)
        if not victim.condition.acquire(blocking=False):
            time.sleep(self._STEAL_BACKOFF)
            return None
        try:
            return victim.tasks.pop() if victim.tasks else None
        finally:
            victim.condition.release()

    def _work(self, index: int) -> None:
        own = self._queues[index]
        while True:
            task: Optional[_Task] = None
            with own.condition:
                if own.tasks:
                    task = own.tasks.popleft()
                elif self._stop:
                    return
            if task is None:
                task = self._steal(index)
            if task is None:
                with own.condition:
                    if not own.tasks and not self._stop:
                        own.condition.wait(self._IDLE_WAIT)
                continue
            task()

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` on a randomly chosen worker's deque."""
        future, task = _make_task(fn, args, kwargs)
        queue = random.choice(self._queues)
        with queue.condition:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            queue.tasks.append(task)
            queue.condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, let the workers drain every deque, and join them."""
        for queue in self._queues:
            with queue.condition:
                self._stop = True
                queue.condition.notify_all()
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> WorkStealingThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()


def main(argv: Optional[list[str]] = None) -> int:
    """Run ten tasks on a four-thread pool, each reporting the thread it ran on."""
    parser = argparse.ArgumentParser(description="Demonstrate the thread pool.")
    parser.parse_args(argv)

    print_lock = threading.Lock()

    def report(number: int) -> None:
        with print_lock:
            print(f"Task {number} executed by thread {threading.get_ident()}", flush=True)

    with ThreadPool(4) as pool:
        for number in range(10):
            pool.submit(report, number)
    return 0