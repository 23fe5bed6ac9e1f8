"""Locks that own the value they protect."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, TypeVar

from extender.result import Result, err, ok

T = TypeVar("T")


class _Guard(Generic[T]):
    __slots__ = ("value", "_release", "_released")

    _ALREADY_RELEASED = "release of unlocked lock"

    def __init__(self, value: T, release: Callable[[], None]) -> None:
        self.value = value
        self._release = release
        self._released = False

    def _unlock(self) -> None:
        if self._released:
            raise RuntimeError(self._ALREADY_RELEASED)
        self._released = True
        self._release()

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, *exc_info: Any) -> None:
        self._unlock()


class MutexGuard(_Guard[T]):
    """Exclusive access to a locked value; ``value`` holds it until unlock."""

    __slots__ = ()
    _ALREADY_RELEASED = "unlock of unlocked mutex"

    def unlock(self) -> None:
        """Release the lock this guard holds."""
        self._unlock()


class RMutexGuard(_Guard[T]):
    """Shared read access to a locked value; ``value`` holds it until runlock."""

    __slots__ = ()
    _ALREADY_RELEASED = "runlock of unlocked RWMutex"

    def runlock(self) -> None:
        """Release the read lock this guard holds."""
        self._unlock()


class Mutex(Generic[T]):
    """A mutex whose value can only be reached by taking the lock."""

    def __init__(self, value: T) -> None:
        self._lock = threading.Lock()
        self._value = value

    def lock(self) -> MutexGuard[T]:
        """Block until the lock is free, then return a guard holding the value."""
        self._lock.acquire()
        return MutexGuard(self._value, self._lock.release)

    def try_lock(self) -> Result[MutexGuard[T], None]:
        """Take the lock if it is free: ok(guard), or err(None) if it is held."""
        if self._lock.acquire(blocking=False):
            return ok(MutexGuard(self._value, self._lock.release))
        return err(None)

    def perform_mut(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` with the value while holding the lock."""
        with self.lock() as value:
            fn(value)


class _ReadWriteLock:
    """A readers-writer lock in which a waiting writer holds off new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def try_acquire_read(self) -> bool:
        with self._cond:
            if self._writer or self._waiting_writers:
                return False
            self._readers += 1
            return True

    def release_read(self) -> None:
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("runlock of unlocked RWMutex")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def try_acquire_write(self) -> bool:
        with self._cond:
            if self._writer or self._readers:
                return False
            self._writer = True
            return True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("unlock of unlocked RWMutex")
            self._writer = False
            self._cond.notify_all()


class RWMutex(Generic[T]):
    """A readers-writer lock whose value can only be reached by taking it."""

    def __init__(self, value: T) -> None:
        self._rw = _ReadWriteLock()
        self._value = value

    def lock(self) -> MutexGuard[T]:
        """Block until no one holds the lock, then return a writing guard."""
        self._rw.acquire_write()
        return MutexGuard(self._value, self._rw.release_write)

    def try_lock(self) -> Result[MutexGuard[T], None]:
        """Take the write lock if free: ok(guard), or err(None) otherwise."""
        if self._rw.try_acquire_write():
            return ok(MutexGuard(self._value, self._rw.release_write))
        return err(None)

    def rlock(self) -> RMutexGuard[T]:
        """Block until no writer holds or waits for the lock, then return a reading guard."""
        self._rw.acquire_read()
        return RMutexGuard(self._value, self._rw.release_read)

    def try_rlock(self) -> Result[RMutexGuard[T], None]:
        """Take a read lock if possible: ok(guard), or err(None) otherwise."""
        if self._rw.try_acquire_read():
            return ok(RMutexGuard(self._value, self._rw.release_read))
        return err(None)

    def perform(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` with the value while holding a read lock."""
        with self.rlock() as value:
            fn(value)

    def perform_mut(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` with the value while holding the write lock."""
        with self.lock() as value:
            fn(value)