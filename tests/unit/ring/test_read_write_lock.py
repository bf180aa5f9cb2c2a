"""
Test: Reader/writer lock

This test validates the ReadWriteLock implementation:
1. Multiple readers hold the lock at the same time
2. A writer excludes readers and other writers
3. Waiting writers block newly arriving readers
4. Releasing a lock that is not held raises

Run with: pytest tests/unit/ring/test_read_write_lock.py
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from rendezvous.ring import ReadWriteLock


def test_concurrent_readers():
    lock = ReadWriteLock()
    readers_inside = threading.Barrier(3, timeout=5.0)

    def read():
        with lock.read_locked():
            # All three readers must be inside at once to pass the barrier
            readers_inside.wait()

    with ThreadPoolExecutor(max_workers=3) as executor:
        futures = [executor.submit(read) for _ in range(3)]
        for future in futures:
            future.result()

    assert lock.readers == 0


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events: list[str] = []
    writer_holding = threading.Event()

    def write():
        with lock.write_locked():
            writer_holding.set()
            time.sleep(0.1)
            events.append("write-done")

    def read():
        writer_holding.wait(timeout=5.0)
        with lock.read_locked():
            events.append("read")

    with ThreadPoolExecutor(max_workers=2) as executor:
        write_future = executor.submit(write)
        read_future = executor.submit(read)
        write_future.result()
        read_future.result()

    assert events == ["write-done", "read"]
    assert lock.writer_active is False


def test_writers_are_serialized():
    lock = ReadWriteLock()
    active = 0
    max_active = 0
    counter_lock = threading.Lock()

    def write():
        nonlocal active, max_active
        for _ in range(100):
            with lock.write_locked():
                with counter_lock:
                    active += 1
                    max_active = max(max_active, active)

                with counter_lock:
                    active -= 1

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = [executor.submit(write) for _ in range(4)]
        for future in futures:
            future.result()

    assert max_active == 1


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    events: list[str] = []

    lock.acquire_read()

    def write():
        with lock.write_locked():
            events.append("write")

    def late_read():
        with lock.read_locked():
            events.append("late-read")

    writer = threading.Thread(target=write)
    writer.start()

    # Wait for the writer to queue up behind the held read lock
    deadline = time.monotonic() + 5.0
    while lock._writers_waiting == 0 and time.monotonic() < deadline:
        time.sleep(0.001)

    reader = threading.Thread(target=late_read)
    reader.start()
    time.sleep(0.05)

    assert events == [], "Neither the writer nor the late reader may proceed yet"

    lock.release_read()
    writer.join(timeout=5.0)
    reader.join(timeout=5.0)

    assert events == ["write", "late-read"]


def test_release_without_acquire_raises():
    lock = ReadWriteLock()

    with pytest.raises(RuntimeError):
        lock.release_read()

    with pytest.raises(RuntimeError):
        lock.release_write()


def test_lock_released_on_exception():
    lock = ReadWriteLock()

    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError("boom")

    assert lock.writer_active is False

    with pytest.raises(ValueError):
        with lock.read_locked():
            raise ValueError("boom")

    assert lock.readers == 0
