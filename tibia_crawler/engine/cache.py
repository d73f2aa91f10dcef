"""In-memory snapshot cache guarded by a readers/writer lock."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from threading import Condition, Lock
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ReadWriteLock:
    """Many readers or one writer, never both.

    Waiting writers block new readers so a steady stream of reads cannot
    starve a refresh.
    """

    def __init__(self) -> None:
        self._cond = Condition(Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class SnapshotCache(Generic[T]):
    """Hold the last successfully parsed value.

    Values must be immutable: ``load`` hands out the stored object itself.
    ``store`` replaces it wholesale, last writer wins.
    """

    def __init__(self, initial: T) -> None:
        self._lock = ReadWriteLock()
        self._value = initial
        self._stored_at: datetime | None = None

    def load(self) -> T:
        with self._lock.read():
            return self._value

    def store(self, value: T) -> None:
        with self._lock.write():
            self._value = value
            self._stored_at = datetime.now(timezone.utc)

    @property
    def stored_at(self) -> datetime | None:
        """When the current value was stored, ``None`` before the first store."""

        with self._lock.read():
            return self._stored_at


__all__ = ["ReadWriteLock", "SnapshotCache"]
