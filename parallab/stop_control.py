"""Cooperative cancellation: a stop source and the tokens it hands out."""

from __future__ import annotations

import sys
import threading
import time

_WORK_INTERVAL = 0.5
_RUN_TIME = 2.0


class StopToken:
    """A view on a stop source's state; empty when built without one."""

    def __init__(self, state: threading.Event | None = None) -> None:
        self._state = state

    def stop_requested(self) -> bool:
        """True once the owning source has requested a stop."""
        return self._state is not None and self._state.is_set()

    def wait_for_stop(self) -> None:
        """Block until a stop is requested."""
        if self._state is None:
            raise RuntimeError("StopToken is empty")
        self._state.wait()


class StopSource:
    """Owns a stop flag and notifies every token made from it."""

    def __init__(self) -> None:
        self._state = threading.Event()

    def request_stop(self) -> None:
        """Request a stop; repeated calls have no further effect."""
        self._state.set()

    def get_token(self) -> StopToken:
        """Return a token that observes this source."""
        return StopToken(self._state)

    def stop_requested(self) -> bool:
        """True once a stop has been requested."""
        return self._state.is_set()

    def __copy__(self):
        raise TypeError("StopSource cannot be copied")


def _worker(token: StopToken) -> None:
    print("Worker started")
    while not token.stop_requested():
        print("Working...")
        time.sleep(_WORK_INTERVAL)
    print("Worker stopped")


def main(argv: list[str] | None = None) -> int:
    """Run a worker for a while and then ask it to stop."""
    try:
        source = StopSource()
        worker = threading.Thread(target=_worker, args=(source.get_token(),))
        worker.start()
        time.sleep(_RUN_TIME)
        print("Requesting stop...")
        source.request_stop()
        worker.join()
        print("Done")
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())