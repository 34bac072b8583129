"""A boolean whose read-modify-write operations are atomic across threads."""

from __future__ import annotations

import threading


class AtomicBool:
    """A thread-safe boolean cell."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: bool = False) -> None:
        self._value = bool(value)
        self._lock = threading.Lock()

    def load(self) -> bool:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value: bool) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = bool(value)

    def compare_exchange(self, expected: bool, new: bool) -> tuple[bool, bool]:
        """Set to ``new`` if the value equals ``expected``.

        Returns ``(succeeded, previous_value)``.
        """
        with self._lock:
            current = self._value
            if current == expected:
                self._value = bool(new)
                return True, current
            return False, current

    def swap(self, new: bool) -> bool:
        """Set a new value and return the old one."""
        with self._lock:
            old, self._value = self._value, bool(new)
            return old

    def fetch_or(self, val: bool) -> bool:
        """OR ``val`` into the value and return the old value."""
        with self._lock:
            old = self._value
            self._value = old | bool(val)
            return old

    def fetch_and(self, val: bool) -> bool:
        """AND ``val`` into the value and return the old value."""
        with self._lock:
            old = self._value
            self._value = old & bool(val)
            return old

    def fetch_xor(self, val: bool) -> bool:
        """XOR ``val`` into the value and return the old value."""
        with self._lock:
            old = self._value
            self._value = old ^ bool(val)
            return old

    def __bool__(self) -> bool:
        return self.load()

    def __repr__(self) -> str:
        return f"AtomicBool({self.load()})"