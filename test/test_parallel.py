import threading
import numpy as np
import pytest
from simfourier import config
from simfourier.parallel import parallel_for

def test_every_index_runs_once():
    hits = np.zeros(100, dtype=np.int64)
    def body(i):
        hits[i] += 1
    parallel_for(0, 100, body, workers=4)
    assert np.all(hits == 1)

def test_empty_range_is_noop():
    calls = []
    parallel_for(5, 5, calls.append)
    parallel_for(5, 2, calls.append)
    assert calls == []

def test_single_worker_runs_inline():
    seen = []
    def body(i):
        seen.append(threading.current_thread())
    parallel_for(0, 4, body, workers=1)
    assert all(t is threading.current_thread() for t in seen)

def test_exception_propagates_after_join():
    done = []
    def body(i):
        if i == 3:
            raise RuntimeError("row 3")
        done.append(i)
    with pytest.raises(RuntimeError, match="row 3"):
        parallel_for(0, 10, body, workers=3)
    assert sorted(done) == [0, 1, 2, 4, 5, 6, 7, 8, 9]

def test_default_workers_env(monkeypatch):
    monkeypatch.setenv(config.THREADS_ENV_VAR, "3")
    assert config.default_workers() == 3
    monkeypatch.setenv(config.THREADS_ENV_VAR, "0")
    with pytest.raises(ValueError):
        config.default_workers()
    monkeypatch.delenv(config.THREADS_ENV_VAR)
    assert config.default_workers() >= 1

def test_pool_is_shared_across_calls():
    from simfourier import parallel
    names = set()
    lock = threading.Lock()
    def body(i):
        with lock:
            names.add(threading.current_thread().name)
    parallel_for(0, 16, body, workers=4)
    pool = parallel._get_executor()
    parallel_for(0, 16, body, workers=4)
    assert parallel._get_executor() is pool
    assert all(n.startswith("simfourier") for n in names)

def test_nested_call_runs_inline():
    hits = np.zeros((8, 8), dtype=np.int64)
    def outer(y):
        def inner(x):
            hits[y, x] += 1
        parallel_for(0, 8, inner, workers=4)
    parallel_for(0, 8, outer, workers=4)
    assert np.all(hits == 1)
