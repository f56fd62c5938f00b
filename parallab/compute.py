"""Chained asynchronous computations with a delay between steps."""

from __future__ import annotations

import asyncio
import sys
from typing import TextIO

_DEFAULT_DELAY = 1.0


async def async_compute(x: int, delay: float = _DEFAULT_DELAY) -> int:
    """Wait ``delay`` seconds, then return twice ``x``."""
    await asyncio.sleep(delay)
    return x * 2


async def example_task(delay: float = _DEFAULT_DELAY, out: TextIO | None = None) -> int:
    """Run two computations one after the other and report both results."""
    print("Start task", file=out)
    result1 = await async_compute(21, delay)
    print(f"Result 1: {result1}", file=out)
    result2 = await async_compute(result1, delay)
    print(f"Result 2: {result2}", file=out)
    return result2


def main(argv: list[str] | None = None) -> int:
    """Run :func:`example_task`; an optional argument sets the delay in seconds."""
    args = sys.argv[1:] if argv is None else argv
    try:
        delay = float(args[0]) if args else _DEFAULT_DELAY
    except ValueError:
        print("Error: delay must be a number", file=sys.stderr)
        return 1
    asyncio.run(example_task(delay))
    return 0


if __name__ == "__main__":
    sys.exit(main())