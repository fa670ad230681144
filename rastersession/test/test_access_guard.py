# pylint: disable=redefined-outer-name

import threading
import time
import multiprocessing.pool
from concurrent.futures import ThreadPoolExecutor

import pytest

from rastersession._access_guard import ExclusiveAccessGuard

@pytest.fixture()
def guard():
    return ExclusiveAccessGuard(object(), 'test')

def test_counters(guard):
    assert (guard.used_count, guard.waiting_count, guard.acquisition_count) == (0, 0, 0)
    with guard.acquire():
        assert (guard.used_count, guard.waiting_count, guard.acquisition_count) == (1, 0, 1)
    assert (guard.used_count, guard.waiting_count, guard.acquisition_count) == (0, 0, 1)
    with guard.acquire():
        pass
    assert (guard.used_count, guard.waiting_count, guard.acquisition_count) == (0, 0, 2)

def test_yields_handle():
    handle = object()
    guard = ExclusiveAccessGuard(handle, 'test')
    with guard.acquire() as obj:
        assert obj is handle

def test_release_on_exception(guard):
    with pytest.raises(ZeroDivisionError):
        with guard.acquire():
            1 / 0
    assert guard.used_count == 0
    with guard.acquire():
        pass

def test_release_on_base_exception(guard):
    with pytest.raises(KeyboardInterrupt):
        with guard.acquire():
            raise KeyboardInterrupt()
    assert guard.used_count == 0
    with guard.acquire():
        pass

def test_reentrance(guard):
    with guard.acquire():
        with pytest.raises(RuntimeError, match='Re-entrant'):
            with guard.acquire():
                pass
        assert guard.used_count == 1
    assert guard.used_count == 0

def test_close(guard):
    assert not guard.closed
    guard.close()
    assert guard.closed
    with pytest.raises(RuntimeError, match='already closed'):
        with guard.acquire():
            pass
    with pytest.raises(RuntimeError, match='already closed'):
        guard.close()
    assert guard.used_count == 0

def test_waiting(guard):
    acquired = threading.Event()
    release = threading.Event()

    def _hold():
        with guard.acquire():
            acquired.set()
            release.wait()

    def _wait():
        with guard.acquire():
            pass

    holder = threading.Thread(target=_hold)
    holder.start()
    acquired.wait()
    waiter = threading.Thread(target=_wait)
    waiter.start()

    for _ in range(1000):
        if guard.waiting_count == 1:
            break
        time.sleep(0.005)
    assert (guard.used_count, guard.waiting_count) == (1, 1)

    release.set()
    holder.join()
    waiter.join()
    assert (guard.used_count, guard.waiting_count, guard.acquisition_count) == (0, 0, 2)

def test_close_waits_for_holder(guard):
    acquired = threading.Event()
    release = threading.Event()

    def _hold():
        with guard.acquire():
            acquired.set()
            release.wait()

    holder = threading.Thread(target=_hold)
    holder.start()
    acquired.wait()
    closer = threading.Thread(target=guard.close)
    closer.start()
    time.sleep(0.05)
    assert not guard.closed

    release.set()
    holder.join()
    closer.join()
    assert guard.closed

def _make_worker(guard, state, state_lock):
    def _work(i):
        with guard.acquire():
            with state_lock:
                state['inside'] += 1
                state['max_inside'] = max(state['max_inside'], state['inside'])
            time.sleep(0.001)
            with state_lock:
                state['inside'] -= 1
        return i
    return _work

def test_mutual_exclusion_thread_pool_executor(guard):
    state = dict(inside=0, max_inside=0)
    work = _make_worker(guard, state, threading.Lock())
    with ThreadPoolExecutor(10) as ex:
        res = list(ex.map(work, range(100)))
    assert res == list(range(100))
    assert state['max_inside'] == 1
    assert guard.acquisition_count == 100
    assert (guard.used_count, guard.waiting_count) == (0, 0)

def test_mutual_exclusion_thread_pool(guard):
    state = dict(inside=0, max_inside=0)
    work = _make_worker(guard, state, threading.Lock())
    pool = multiprocessing.pool.ThreadPool(10)
    try:
        res = pool.map(work, range(100))
    finally:
        pool.terminate()
        pool.join()
    assert res == list(range(100))
    assert state['max_inside'] == 1
    assert guard.acquisition_count == 100
