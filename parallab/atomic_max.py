"""A thread-safe holder of the largest value seen so far."""

from __future__ import annotations

import numbers
import sys
import threading
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


class AtomicMax(Generic[T]):
    """Keeps the maximum of all values offered to it, safely across threads."""

    def __init__(self, value: T) -> None:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError("AtomicMax requires an arithmetic value")
        self._value = value
        self._lock = threading.Lock()

    def update(self, new_value: T) -> None:
        """Replace the stored value if ``new_value`` is larger."""
        if new_value > self._value:
            with self._lock:
                if new_value > self._value:
                    self._value = new_value

    @property
    def value(self) -> T:
        """The largest value seen so far."""
        return self._value

    def __repr__(self) -> str:
        return f"AtomicMax({self._value!r})"


def main(argv: list[str] | None = None) -> int:
    """Show how the maximum changes as values are offered."""
    try:
        max_value = AtomicMax(0)
        print(f"Initial max value: {max_value.value}")
        for candidate in (10, 5, 15):
            max_value.update(candidate)
            print(f"After update with {candidate}: {max_value.value}")
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())