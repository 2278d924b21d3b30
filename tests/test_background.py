import copy
from datetime import timedelta

import pytest

from reqkit.background import GlobalThreadPool, cleanup, run_async, startup
from reqkit.threadpool import DEFAULT_MAX_THREADS, DEFAULT_MIN_THREADS


@pytest.fixture(autouse=True)
def _fresh_pool():
    cleanup()
    yield
    cleanup()


def test_get_instance_returns_same_pool():
    pool = GlobalThreadPool.get_instance()
    assert pool is GlobalThreadPool.get_instance()
    assert pool.is_started() is False
    startup(1, 2, 100)
    assert GlobalThreadPool.get_instance() is pool
    assert pool.is_started() is True


def test_run_async_returns_result():
    assert run_async(lambda a, b: a * b, 6, 7).result(timeout=5) == 42


def test_run_async_with_kwargs():
    assert run_async(lambda *, text: text[::-1], text="abc").result(timeout=5) == "cba"


def test_run_async_propagates_exception():
    def fail():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        run_async(fail).result(timeout=5)


def test_startup_configures_pool():
    startup(1, 3, 50)
    pool = GlobalThreadPool.get_instance()
    assert pool.is_started() is True
    assert pool.min_thread_num == 1
    assert pool.max_thread_num == 3
    assert pool.max_idle_time == timedelta(milliseconds=50)
    assert pool.thread_count == 1


def test_startup_again_is_ignored():
    startup(1, 3, 50)
    startup(2, 8, 500)
    pool = GlobalThreadPool.get_instance()
    assert pool.min_thread_num == 1
    assert pool.max_thread_num == 3


def test_startup_defaults():
    startup()
    pool = GlobalThreadPool.get_instance()
    assert pool.min_thread_num == DEFAULT_MIN_THREADS
    assert pool.max_thread_num == DEFAULT_MAX_THREADS


def test_cleanup_discards_instance():
    startup(1, 2, 100)
    first = GlobalThreadPool.get_instance()
    cleanup()
    assert first.is_started() is False
    second = GlobalThreadPool.get_instance()
    assert second is not first
    assert second.is_started() is False


def test_global_pool_cannot_be_copied():
    pool = GlobalThreadPool.get_instance()
    with pytest.raises(TypeError):
        copy.copy(pool)
    with pytest.raises(TypeError):
        copy.deepcopy(pool)