"""Bitonic sorting network, run pass by pass as a data-parallel kernel would."""

from __future__ import annotations

import random
import sys
import time
from typing import Iterable, MutableSequence

DEFAULT_SIZE = 1 << 20
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def stage_count(size: int) -> int:
    """Number of stages the network needs for ``size`` elements (floor of log2)."""
    if size < 0:
        raise ValueError("size cannot be negative")
    return max(size.bit_length() - 1, 0)


def bitonic_pass(data: MutableSequence[int], stage: int, pass_index: int) -> None:
    """Apply one compare-and-swap pass of the network to ``data`` in place.

    Every work item compares the element at its left index with the one
    ``2 ** pass_index`` further on; blocks of ``2 ** stage`` alternate between
    ascending and descending order.
    """
    pair_distance = 1 << pass_index
    block_width = 2 * pair_distance
    for work_id in range(len(data) // 2):
        left = work_id % pair_distance + (work_id // pair_distance) * block_width
        right = left + pair_distance
        ascending = (left >> stage) % 2 == 0
        left_val, right_val = data[left], data[right]
        if (left_val > right_val) == ascending:
            data[left], data[right] = right_val, left_val


def bitonic_sort(data: Iterable[int]) -> list[int]:
    """Return the values of ``data`` sorted ascending with a bitonic network.

    The number of values must be a non-zero power of two.
    """
    values = list(data)
    size = len(values)
    if size == 0 or size & (size - 1):
        raise ValueError("Array size must be a power of two and non-zero")
    for stage in range(1, stage_count(size) + 1):
        for pass_index in reversed(range(stage)):
            bitonic_pass(values, stage, pass_index)
    return values


def _is_sorted(values: list[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def _run_bitonic(data: list[int]) -> None:
    print(f"Starting bitonic sort with size: {len(data)}")
    try:
        start = time.perf_counter()
        result = bitonic_sort(data)
        elapsed = time.perf_counter() - start
    except ValueError as exc:
        print(f"Bitonic sort failed: {exc}", file=sys.stderr)
        return
    print(f"Bitonic sort time: {elapsed} seconds")
    if _is_sorted(result):
        print("Bitonic array is sorted correctly")
    else:
        print("Error: bitonic array is not sorted")


def _run_builtin(data: list[int]) -> None:
    start = time.perf_counter()
    result = sorted(data)
    elapsed = time.perf_counter() - start
    print(f"Built-in sort time: {elapsed} seconds")
    if _is_sorted(result):
        print("Built-in array is sorted correctly")
    else:
        print("Error: built-in array is not sorted")


def main(argv: list[str] | None = None) -> int:
    """Sort random 32-bit integers both ways and report the timings.

    An optional argument sets the number of values.
    """
    args = sys.argv[1:] if argv is None else argv
    try:
        size = int(args[0]) if args else DEFAULT_SIZE
    except ValueError:
        print("Error: size must be an integer", file=sys.stderr)
        return 1
    if size < 0:
        print("Error: size cannot be negative", file=sys.stderr)
        return 1
    rng = random.Random()
    data = [rng.randint(_INT32_MIN, _INT32_MAX) for _ in range(size)]
    _run_bitonic(data)
    _run_builtin(data)
    return 0


if __name__ == "__main__":
    sys.exit(main())