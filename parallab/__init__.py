"""Concurrency building blocks: atomics, stop tokens, a thread pool, coroutine tasks, async file copying, bitonic sorting, Gaussian weights and UDP streaming."""

__version__ = "0.1.0"