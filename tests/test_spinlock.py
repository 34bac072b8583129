import threading

import pytest

from awaitkit.spinlock import SpinMutex


def test_threads_increment_counter():
    counter = SpinMutex(0)

    def bump():
        with counter.lock() as guard:
            guard.value += 1

    threads = [threading.Thread(target=bump) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    with counter.lock() as guard:
        assert guard.value == 10


def test_guard_gives_access_to_mutable_data():
    items = SpinMutex([])
    with items.lock() as guard:
        guard.value.append("a")
    with items.lock() as guard:
        assert guard.value == ["a"]


def test_release_allows_relock():
    mutex = SpinMutex("data")
    guard = mutex.lock()
    guard.release()
    second = mutex.lock()
    assert second.value == "data"
    second.release()


def test_access_after_release_raises():
    mutex = SpinMutex(1)
    guard = mutex.lock()
    assert guard.value == 1
    guard.release()
    with pytest.raises(RuntimeError):
        _ = guard.value
    with pytest.raises(RuntimeError):
        guard.value = 2
    with mutex.lock() as fresh:
        assert fresh.value == 1


def test_double_release_raises():
    guard = SpinMutex(1).lock()
    guard.release()
    with pytest.raises(RuntimeError):
        guard.release()


def test_explicit_release_inside_with_block():
    mutex = SpinMutex(5)
    with mutex.lock() as guard:
        guard.release()
    with mutex.lock() as guard:
        assert guard.value == 5


def test_lock_blocks_until_released():
    mutex = SpinMutex([])
    guard = mutex.lock()
    started = threading.Event()

    def waiter():
        started.set()
        with mutex.lock() as inner:
            inner.value.append("waiter")

    thread = threading.Thread(target=waiter)
    thread.start()
    started.wait()
    guard.value.append("holder")
    guard.release()
    thread.join()
    with mutex.lock() as final:
        assert final.value == ["holder", "waiter"]