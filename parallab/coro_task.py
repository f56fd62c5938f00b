"""An eagerly started task that produces one value through ``return``."""

from __future__ import annotations

import sys
from typing import Any, Generator, Generic, TypeVar

T = TypeVar("T")


class Task(Generic[T]):
    """Wraps a generator, runs it at once up to its first suspension point.

    The generator hands over its result with ``return``; an exception it
    raises is kept and re-raised by :meth:`result`.
    """

    def __init__(self, gen: Generator[Any, None, T]) -> None:
        self._gen = gen
        self._done = False
        self._value: T | None = None
        self._exception: BaseException | None = None
        self._step()

    def _step(self) -> None:
        try:
            next(self._gen)
        except StopIteration as stop:
            self._done = True
            self._value = stop.value
        except Exception as exc:  # noqa: BLE001
            self._done = True
            self._exception = exc

    @property
    def done(self) -> bool:
        """True once the wrapped generator has finished."""
        return self._done

    def result(self) -> T | None:
        """Resume the task once if it is unfinished and return its value.

        Raises the exception the generator ended with, if any. An unfinished
        task that still has not completed after the resumption yields None.
        """
        if not self._done:
            self._step()
        if self._exception is not None:
            raise self._exception
        return self._value


def _hello() -> Generator[None, None, str]:
    yield from ()
    return "Hello from coroutine!"


def simple_coroutine() -> Task[str]:
    """Start a task that returns a greeting."""
    return Task(_hello())


def main(argv: list[str] | None = None) -> int:
    """Print the greeting produced by :func:`simple_coroutine`."""
    task = simple_coroutine()
    print(task.result())
    return 0


if __name__ == "__main__":
    sys.exit(main())