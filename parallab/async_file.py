"""Asynchronous file copying built on raw file descriptors and asyncio."""

from __future__ import annotations

import asyncio
import enum
import os
import sys
from pathlib import Path
from typing import Callable, TypeVar

_R = TypeVar("_R")

DEFAULT_CHUNK_SIZE = 4 * 1024
_CREATE_MODE = 0o644


class OpenMode(enum.Enum):
    """How a file is opened."""

    READ = "read"
    WRITE = "write"

    @property
    def flags(self) -> int:
        """The ``os.open`` flags for this mode."""
        binary = getattr(os, "O_BINARY", 0)
        if self is OpenMode.READ:
            return os.O_RDONLY | binary
        return os.O_WRONLY | os.O_CREAT | os.O_TRUNC | binary


async def _offload(func: Callable[..., _R], *args) -> _R:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


class AsyncFile:
    """An open file descriptor whose reads and writes do not block the event loop."""

    def __init__(self, fd: int = -1) -> None:
        self.fd = fd

    def is_open(self) -> bool:
        """True while the descriptor has not been closed."""
        return self.fd != -1

    async def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means end of file."""
        if not self.is_open():
            raise RuntimeError("File is not open for reading")
        return await _offload(os.read, self.fd, size)

    async def write(self, data: bytes) -> int:
        """Write ``data`` and return how many bytes were written."""
        if not self.is_open():
            raise RuntimeError("File is not open for writing")
        return await _offload(os.write, self.fd, bytes(data))

    def close(self) -> None:
        """Close the descriptor; closing twice does nothing."""
        if self.fd != -1:
            fd, self.fd = self.fd, -1
            os.close(fd)

    async def __aenter__(self) -> "AsyncFile":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AsyncFile(fd={self.fd})"


async def open_file(path: str | os.PathLike, mode: OpenMode) -> AsyncFile:
    """Open ``path`` for reading, or create/truncate it for writing."""
    fd = await _offload(os.open, os.fspath(path), mode.flags, _CREATE_MODE)
    return AsyncFile(fd)


async def copy_file(
    source: str | os.PathLike,
    target: str | os.PathLike,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Copy ``source`` to ``target`` chunk by chunk and return the bytes copied.

    A short write stops the copy early and is reported on standard error.
    """
    print(f"Starting copy of {source} -> {target}")
    total = 0
    async with await open_file(source, OpenMode.READ) as infile:
        print(f"Opened {source} for reading (fd: {infile.fd})")
        async with await open_file(target, OpenMode.WRITE) as outfile:
            print(f"Opened {target} for writing (fd: {outfile.fd})")
            while chunk := await infile.read(chunk_size):
                written = await outfile.write(chunk)
                if written != len(chunk):
                    print(
                        f"Short write to {target}! Expected {len(chunk)}, wrote {written}",
                        file=sys.stderr,
                    )
                    break
                total += written
    print(f"Finished copying {source} to {target}. Total bytes: {total}")
    return total


async def copy_two_files(directory: str | os.PathLike = ".") -> tuple[int, int]:
    """Copy ``a.in`` to ``a.out`` and then ``b.in`` to ``b.out`` inside ``directory``."""
    base = Path(directory)
    print("Starting copy of two files.")
    first = copy_file(base / "a.in", base / "a.out")
    second = copy_file(base / "b.in", base / "b.out")
    copied_a = await first
    print("Task 1 (a.in -> a.out) finished.")
    copied_b = await second
    print("Task 2 (b.in -> b.out) finished.")
    print("Copy of two files finished.")
    return copied_a, copied_b


def _write_sample_inputs(base: Path) -> None:
    (base / "a.in").write_text(
        "".join(f"Это файл A, строка {i} какого-то текста для проверки.\n" for i in range(512)),
        encoding="utf-8",
    )
    (base / "b.in").write_text(
        "".join(f"Содержимое файла B, элемент {i} еще немного данных.\n" for i in range(256)),
        encoding="utf-8",
    )


def main(argv: list[str] | None = None) -> int:
    """Create two sample files and copy both; an optional argument names the directory."""
    args = sys.argv[1:] if argv is None else argv
    base = Path(args[0]) if args else Path.cwd()
    try:
        _write_sample_inputs(base)
        asyncio.run(copy_two_files(base))
    except OSError as exc:
        print(f"System error: {exc} (code: {exc.errno})", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Program finished successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())