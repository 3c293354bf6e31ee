"""
simfourier/parallel.py

Fork-join helper for row-independent kernels.

parallel_for(start, end, body, workers=None) runs body(i) once for every i in
[start, end) on a shared thread pool and returns when all calls have finished.
Bodies must only touch memory owned by their own index.

The pool is created on first use with config.default_workers() threads and
lives for the rest of the process.
"""

from concurrent.futures import ThreadPoolExecutor
import threading
from typing import Callable, Optional

from . import config

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()
_in_pool = threading.local()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    if _executor is None:
        with _executor_lock:
            if _executor is None:
                _executor = ThreadPoolExecutor(
                    max_workers=config.default_workers(),
                    thread_name_prefix="simfourier",
                )
    return _executor


def _run_chunk(body: Callable[[int], None], indices: range):
    """Run body over indices; return the first exception instead of stopping."""
    first_error = None
    for i in indices:
        try:
            body(i)
        except Exception as exc:
            if first_error is None:
                first_error = exc
    return first_error


def _pool_task(body: Callable[[int], None], indices: range):
    # nested parallel_for calls from a pool thread run inline, so they never
    # wait on a pool that may have no free threads
    _in_pool.active = True
    try:
        return _run_chunk(body, indices)
    finally:
        _in_pool.active = False


def parallel_for(start: int, end: int, body: Callable[[int], None], workers: Optional[int] = None):
    """
    Execute body(i) for i in [start, end), blocking until every call completes.

    The range is split into `workers` contiguous chunks (default
    config.default_workers()) that run on the shared pool. With one worker, a
    single index, or when called from inside a pool thread, the loop runs
    inline on the calling thread. If any body raises, the remaining calls
    still run to completion and the first exception, in index order, is
    re-raised.
    """
    if end <= start:
        return
    n_workers = config.default_workers() if workers is None else int(workers)
    if n_workers < 1:
        raise ValueError("workers must be >= 1.")
    n_workers = min(n_workers, end - start)

    if n_workers == 1 or getattr(_in_pool, "active", False):
        error = _run_chunk(body, range(start, end))
        if error is not None:
            raise error
        return

    total = end - start
    bounds = [start + (total * k) // n_workers for k in range(n_workers + 1)]
    pool = _get_executor()
    futures = [
        pool.submit(_pool_task, body, range(bounds[k], bounds[k + 1]))
        for k in range(n_workers)
    ]
    errors = [f.result() for f in futures]
    for error in errors:
        if error is not None:
            raise error
