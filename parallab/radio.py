"""Streaming 16-bit mono audio over UDP from a station to one listener."""

from __future__ import annotations

import enum
import logging
import re
import signal
import socket
import struct
import sys
import threading
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

SAMPLE_RATE = 44100
CHANNELS = 1
BLOCK_SIZE = 1024

_PREVIEW = 8
_POLL_INTERVAL = 0.1
_JOIN_TIMEOUT = 2.0
_CONNECT_BUFSIZE = 65535
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_PORT_PREFIX = re.compile(r"\s*[+-]?\d+")
_USAGE = "Usage:\n  Server: radio <port>\n  Client: radio <address> <port>\n"

logger = logging.getLogger(__name__)

Capture = Callable[[int], Sequence[int]]
Playback = Callable[[Sequence[int]], None]


class Mode(enum.Enum):
    """Whether the program broadcasts or listens."""

    SERVER = "server"
    CLIENT = "client"


@dataclass(frozen=True)
class Args:
    """Parsed command line."""

    mode: Mode
    address: str
    port: int


def _parse_port(text: str) -> int:
    match = _PORT_PREFIX.match(text)
    if match is None:
        raise ValueError("Port must be a valid number")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("Port number is out of range")
    return value


def parse_args(argv: Sequence[str]) -> Args:
    """Parse ``<port>`` (server) or ``<address> <port>`` (client)."""
    if not 1 <= len(argv) <= 2:
        raise ValueError(_USAGE)
    if len(argv) == 1:
        args = Args(Mode.SERVER, "", _parse_port(argv[0]))
    else:
        args = Args(Mode.CLIENT, argv[0], _parse_port(argv[1]))
    if not 1 <= args.port <= 65535:
        raise ValueError("Port must be between 1 and 65535")
    return args


def encode_samples(samples: Sequence[int]) -> bytes:
    """Pack signed 16-bit samples in network byte order."""
    try:
        return struct.pack(f">{len(samples)}h", *samples)
    except struct.error as exc:
        raise ValueError(f"Samples must be 16-bit signed integers: {exc}") from exc


def decode_samples(data: bytes) -> list[int]:
    """Unpack network-order 16-bit samples; a trailing odd byte is ignored."""
    count = len(data) // 2
    return list(struct.unpack_from(f">{count}h", data))


def _preview(samples: Sequence[int]) -> str:
    return " ".join(str(sample) for sample in samples[:_PREVIEW]) + " ..."


def _chunks(samples: list[int], size: int) -> Iterator[list[int]]:
    for start in range(0, len(samples), size):
        yield samples[start:start + size]


def _read_stdin_block(count: int) -> Sequence[int]:
    data = sys.stdin.buffer.read(count * 2)
    usable = len(data) // 2
    return struct.unpack(f"<{usable}h", data[: usable * 2])


def _write_stdout_block(samples: Sequence[int]) -> None:
    sys.stdout.buffer.write(struct.pack(f"<{len(samples)}h", *samples))
    sys.stdout.buffer.flush()


class RadioServer:
    """Captures audio blocks and streams them to the first client that calls in.

    ``capture(count)`` returns up to ``count`` samples; an empty result ends
    capturing. By default raw little-endian samples are read from stdin.
    """

    def __init__(self, port: int, capture: Capture | None = None) -> None:
        self._capture = capture or _read_stdin_block
        self._buffer: list[int] = []
        self._cond = threading.Condition()
        self._running = True
        self._threads: list[threading.Thread] = []
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.bind(("", port))
        except OSError as exc:
            self._sock.close()
            raise RuntimeError("Failed to bind socket") from exc
        self._sock.settimeout(_POLL_INTERVAL)

    def run(self) -> None:
        """Start the capture and sending threads."""
        if self._threads:
            raise RuntimeError("RadioServer is already running")
        self._threads = [
            threading.Thread(target=self._audio_capture, daemon=True),
            threading.Thread(target=self._network_send, daemon=True),
        ]
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Stop both threads and release the socket."""
        with self._cond:
            self._running = False
            self._cond.notify_all()
        for thread in self._threads:
            thread.join(_JOIN_TIMEOUT)
        self._sock.close()

    def _alive(self) -> bool:
        return any(thread.is_alive() for thread in self._threads)

    def _audio_capture(self) -> None:
        while self._running:
            try:
                block = list(self._capture(BLOCK_SIZE))
            except OSError as exc:
                logger.error("Audio capture failed: %s", exc)
                break
            if not block:
                break
            logger.info("[MIC] %s", _preview(block))
            with self._cond:
                self._buffer.extend(block)
                self._cond.notify()

    def _wait_for_client(self) -> tuple[str, int] | None:
        logger.info("Waiting for client to connect...")
        while self._running:
            try:
                data, client = self._sock.recvfrom(_CONNECT_BUFSIZE)
            except socket.timeout:
                continue
            except OSError:
                break
            if not data:
                break
            logger.info("Client connected from %s:%d", client[0], client[1])
            return client
        if self._running:
            logger.error("Error waiting for client connection!")
        return None

    def _network_send(self) -> None:
        client = self._wait_for_client()
        if client is None:
            return
        while True:
            with self._cond:
                self._cond.wait_for(lambda: not self._running or bool(self._buffer))
                if not self._running:
                    break
                samples, self._buffer = self._buffer, []
            logger.info("[UDP] %s", _preview(samples))
            for chunk in _chunks(samples, BLOCK_SIZE):
                try:
                    self._sock.sendto(encode_samples(chunk), client)
                except OSError as exc:
                    logger.error("Send failed: %s", exc)


class RadioClient:
    """Receives audio from a station and plays it block by block.

    ``playback(samples)`` receives blocks of ``BLOCK_SIZE`` samples, silence
    when nothing has arrived yet. By default raw little-endian samples are
    written to stdout.
    """

    def __init__(self, address: str, port: int, playback: Playback | None = None) -> None:
        self._playback = playback or _write_stdout_block
        self._buffer: list[int] = []
        self._lock = threading.Lock()
        self._running = True
        self._threads: list[threading.Thread] = []
        logger.info("%s", address)
        try:
            socket.inet_pton(socket.AF_INET, address)
        except OSError as exc:
            raise ValueError("Invalid address") from exc
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.connect((address, port))
        except OSError as exc:
            self._sock.close()
            raise RuntimeError("Failed to connect") from exc
        self._sock.settimeout(_POLL_INTERVAL)
        self._sock.send(b"\x00")

    def run(self) -> None:
        """Start the receiving and playback threads."""
        if self._threads:
            raise RuntimeError("RadioClient is already running")
        self._threads = [
            threading.Thread(target=self._network_receive, daemon=True),
            threading.Thread(target=self._play_audio, daemon=True),
        ]
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Stop both threads and release the socket."""
        self._running = False
        for thread in self._threads:
            thread.join(_JOIN_TIMEOUT)
        self._sock.close()

    def _alive(self) -> bool:
        return any(thread.is_alive() for thread in self._threads)

    def _network_receive(self) -> None:
        while self._running:
            try:
                data = self._sock.recv(BLOCK_SIZE * 2)
            except socket.timeout:
                continue
            except OSError:
                break
            if not data:
                break
            samples = decode_samples(data)
            logger.info("[UDP RECV] %s", _preview(samples))
            with self._lock:
                self._buffer.extend(samples)

    def _play_audio(self) -> None:
        while self._running:
            with self._lock:
                if len(self._buffer) >= BLOCK_SIZE:
                    block = self._buffer[:BLOCK_SIZE]
                    del self._buffer[:BLOCK_SIZE]
                else:
                    block = [0] * BLOCK_SIZE
            logger.info("[AUDIO OUT] %s", _preview(block))
            try:
                self._playback(block)
            except OSError as exc:
                logger.error("Audio playback failed: %s", exc)
                break


def main(argv: list[str] | None = None) -> int:
    """Run as a station (``<port>``) or a listener (``<address> <port>``)."""
    args_list = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(message)s")
    stop_requested = threading.Event()

    def _on_signal(signum, frame) -> None:
        stop_requested.set()

    previous = {sig: signal.signal(sig, _on_signal) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        args = parse_args(args_list)
        station: RadioServer | RadioClient
        if args.mode is Mode.SERVER:
            station = RadioServer(args.port)
        else:
            station = RadioClient(args.address, args.port)
        station.run()
        try:
            while station._alive() and not stop_requested.wait(_POLL_INTERVAL):
                pass
        finally:
            station.stop()
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())