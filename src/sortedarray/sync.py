from __future__ import annotations

import enum
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Union

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    SAFE = "safe"
    UNSAFE = "unsafe"


DEFAULT_MODE = Mode.SAFE


class ReadWriteLock:
    """
    Many readers or a single writer.

    Waiting writers block new readers, so readers cannot starve a writer.
    Not re-entrant: acquiring it again from the thread that holds it
    deadlocks.
    """

    is_safe = True

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class NoLock:
    """Same interface as ReadWriteLock, does nothing. Single-threaded use only."""

    is_safe = False

    def acquire_read(self) -> None:
        pass

    def release_read(self) -> None:
        pass

    def acquire_write(self) -> None:
        pass

    def release_write(self) -> None:
        pass

    @contextmanager
    def read(self) -> Iterator[None]:
        yield

    @contextmanager
    def write(self) -> Iterator[None]:
        yield


Lock = Union[ReadWriteLock, NoLock]


def new_lock(mode: Mode) -> Lock:
    if not isinstance(mode, Mode):
        raise ValueError(f"mode must be a Mode, got {mode!r}")
    if mode is Mode.SAFE:
        return ReadWriteLock()
    logger.debug("creating unsynchronized lock")
    return NoLock()
