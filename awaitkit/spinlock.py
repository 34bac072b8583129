"""A spin lock that owns the data it protects."""

from __future__ import annotations

import time
from typing import Generic, TypeVar

from .atomic import AtomicBool

T = TypeVar("T")


class SpinMutex(Generic[T]):
    """A mutual-exclusion lock that spins, yielding, until it is free."""

    def __init__(self, data: T) -> None:
        self._locked = AtomicBool(False)
        self._data = data

    def lock(self) -> MutexGuard[T]:
        """Wait for the lock and return a guard giving access to the data."""
        while not self._locked.compare_exchange(False, True)[0]:
            time.sleep(0)
        return MutexGuard(self)

    def __repr__(self) -> str:
        state = "locked" if self._locked.load() else "unlocked"
        return f"SpinMutex(<{state}>)"


class MutexGuard(Generic[T]):
    """Access to a SpinMutex's data while the lock is held."""

    def __init__(self, mutex: SpinMutex[T]) -> None:
        self._mutex = mutex
        self._held = True

    def _check(self) -> None:
        if not self._held:
            raise RuntimeError("mutex guard already released")

    @property
    def value(self) -> T:
        """The protected data."""
        self._check()
        return self._mutex._data

    @value.setter
    def value(self, new: T) -> None:
        self._check()
        self._mutex._data = new

    def release(self) -> None:
        """Give the lock back."""
        self._check()
        self._held = False
        self._mutex._locked.store(False)

    def __enter__(self) -> MutexGuard[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._held:
            self.release()