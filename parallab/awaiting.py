"""A hand-driven coroutine that suspends on a custom awaitable."""

from __future__ import annotations

import sys
from typing import Any, Coroutine, Generator, TextIO


class SumAwaiter:
    """An awaitable that always suspends once and then yields ``x + y``."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __await__(self) -> Generator[None, None, int]:
        yield
        return self.x + self.y


class ResumableTask:
    """Starts a coroutine at once and lets the caller resume it by hand."""

    def __init__(self, coro: Coroutine[Any, None, Any]) -> None:
        self._coro = coro
        self._done = False
        self._advance()

    def _advance(self) -> None:
        try:
            self._coro.send(None)
        except StopIteration:
            self._done = True

    def resume(self) -> None:
        """Continue the coroutine from where it last suspended."""
        if not self._done:
            self._advance()

    def done(self) -> bool:
        """True once the coroutine has run to its end."""
        return self._done


async def coroutine_with_await(x: int, y: int, out: TextIO | None = None) -> None:
    """Report progress around an await on :class:`SumAwaiter`."""
    print("Before await", file=out)
    result = await SumAwaiter(x, y)
    print(result, file=out)
    print("After await", file=out)


def main(argv: list[str] | None = None) -> int:
    """Show the interleaving of a suspended coroutine with its caller."""
    task = ResumableTask(coroutine_with_await(30, 12))
    print("Before resume")
    task.resume()
    print("After resume")
    ResumableTask(coroutine_with_await(5, 10)).resume()
    print("End of main")
    return 0


if __name__ == "__main__":
    sys.exit(main())