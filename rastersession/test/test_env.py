import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

import rastersession as rs

def work(i):
    drivers = ('GTiff',) if i % 2 else ('VRT', 'GTiff')
    assert rs.env.check_window_bounds is False
    with rs.Env(allowed_drivers=drivers):
        assert rs.env.allowed_drivers == drivers
        time.sleep(np.random.rand() / 100)
        assert rs.env.allowed_drivers == drivers
    assert rs.env.allowed_drivers is None

def test_thread_pool():
    with rs.Env(check_window_bounds=False):
        with ThreadPoolExecutor(10) as ex:
            it = ex.map(
                work,
                range(100),
            )
            list(it)

def test_defaults():
    assert rs.env.check_window_bounds is True
    assert rs.env.allowed_drivers is None
    assert rs.env.open_options == ()

def test_nesting():
    with rs.Env(open_options=['NUM_THREADS=2']):
        assert rs.env.open_options == ('NUM_THREADS=2',)
        with rs.Env(open_options=[], allowed_drivers='GTiff'):
            assert rs.env.open_options == ()
            assert rs.env.allowed_drivers == ('GTiff',)
        assert rs.env.open_options == ('NUM_THREADS=2',)
        assert rs.env.allowed_drivers is None
    assert rs.env.open_options == ()

def test_decorator():
    @rs.Env(check_window_bounds=False)
    def f():
        return rs.env.check_window_bounds

    assert f() is False
    assert rs.env.check_window_bounds is True

def test_invalid():
    with pytest.raises(ValueError, match='Unknown'):
        rs.Env(significant=9)
    with pytest.raises(ValueError, match='bool'):
        rs.Env(check_window_bounds=1)
    with pytest.raises(ValueError, match='KEY=VALUE'):
        rs.Env(open_options=['NUM_THREADS'])
    with pytest.raises(ValueError, match='empty'):
        rs.Env(allowed_drivers=[])
