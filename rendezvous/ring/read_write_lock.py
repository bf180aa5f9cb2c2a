from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    Many concurrent readers or a single writer.

    Writers that are waiting block new readers from entering, so a steady
    stream of lookups cannot starve membership updates. The lock is not
    reentrant: a thread holding it must not acquire it again.

    Usage:
        lock = ReadWriteLock()

        with lock.read_locked():
            ...  # shared access

        with lock.write_locked():
            ...  # exclusive access
    """

    __slots__ = (
        "_condition",
        "_readers",
        "_writer_active",
        "_writers_waiting",
    )

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._condition:
            while self._writer_active or self._writers_waiting > 0:
                self._condition.wait()

            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a held read lock")

            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers > 0:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1

            self._writer_active = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writer_active:
                raise RuntimeError("release_write() called without a held write lock")

            self._writer_active = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        with self._condition:
            return self._readers

    @property
    def writer_active(self) -> bool:
        with self._condition:
            return self._writer_active
