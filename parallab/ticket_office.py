"""A ticket office that can be shared safely between threads."""

from __future__ import annotations

import sys
import threading


class TicketOffice:
    """Sells tickets from a fixed stock; never sells more than it holds."""

    def __init__(self, num_tickets: int) -> None:
        if num_tickets < 0:
            raise ValueError("Initial ticket count cannot be negative")
        self._tickets = num_tickets
        self._lock = threading.Lock()

    def sell_tickets(self, tickets_to_buy: int) -> int:
        """Sell up to ``tickets_to_buy`` tickets and return how many were sold."""
        if tickets_to_buy <= 0:
            raise ValueError("tickets_to_buy must be positive")
        with self._lock:
            sold = min(tickets_to_buy, self._tickets)
            self._tickets -= sold
            return sold

    @property
    def tickets_left(self) -> int:
        """Number of tickets still for sale."""
        return self._tickets


def main(argv: list[str] | None = None) -> int:
    """Sell a couple of batches and report the stock after each."""
    try:
        office = TicketOffice(100)
        print(f"Initial tickets: {office.tickets_left}")
        for request in (30, 80):
            sold = office.sell_tickets(request)
            print(f"Sold {sold} tickets")
            print(f"Remaining tickets: {office.tickets_left}")
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())