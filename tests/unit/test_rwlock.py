import threading

import pytest

from employee_service.utils.rwlock import ReadWriteLock


def test_readers_share_the_lock(run_in_thread):
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=5)
    results = []

    def reader():
        with lock.read():
            both_inside.wait()
            results.append("ok")

    threads = [run_in_thread(reader), run_in_thread(reader)]
    for t in threads:
        t.join(timeout=5)
    assert results == ["ok", "ok"]
    assert lock.readers == 0


def test_writer_waits_for_reader(run_in_thread):
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer():
        with lock.write():
            acquired.set()

    lock.acquire_read()
    run_in_thread(writer)
    assert not acquired.wait(timeout=0.2)
    lock.release_read()
    assert acquired.wait(timeout=5)


def test_reader_waits_for_writer(run_in_thread):
    lock = ReadWriteLock()
    acquired = threading.Event()

    def reader():
        with lock.read():
            acquired.set()

    lock.acquire_write()
    assert lock.write_locked is True
    run_in_thread(reader)
    assert not acquired.wait(timeout=0.2)
    lock.release_write()
    assert acquired.wait(timeout=5)


def test_writers_exclude_each_other(run_in_thread):
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer():
        with lock.write():
            acquired.set()

    lock.acquire_write()
    run_in_thread(writer)
    assert not acquired.wait(timeout=0.2)
    lock.release_write()
    assert acquired.wait(timeout=5)


def test_waiting_writer_blocks_new_readers(run_in_thread):
    lock = ReadWriteLock()
    order = []
    writer_done = threading.Event()
    reader_done = threading.Event()

    def writer():
        with lock.write():
            order.append("writer")
        writer_done.set()

    def late_reader():
        with lock.read():
            order.append("reader")
        reader_done.set()

    lock.acquire_read()
    run_in_thread(writer)
    # Give the writer time to register as waiting.
    assert not writer_done.wait(timeout=0.2)
    run_in_thread(late_reader)
    assert not reader_done.wait(timeout=0.2)

    lock.release_read()
    assert writer_done.wait(timeout=5)
    assert reader_done.wait(timeout=5)
    assert order == ["writer", "reader"]


def test_lock_released_when_block_raises():
    lock = ReadWriteLock()
    with pytest.raises(ValueError):
        with lock.write():
            raise ValueError("boom")
    assert lock.write_locked is False

    with pytest.raises(ValueError):
        with lock.read():
            raise ValueError("boom")
    assert lock.readers == 0

    # Both sides are usable again.
    with lock.write():
        pass
    with lock.read():
        pass


def test_unmatched_release_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
