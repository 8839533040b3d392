"""Single-flight gate for outbound backend calls.

Tracks which refresh/accept operations are currently in flight. Only the
dispatch loop reads or writes it, so it needs no locking.
"""

from __future__ import annotations

import itertools
from collections import Counter
from dataclasses import dataclass

REFRESH = "refresh"
ACCEPT = "accept"
OPERATION_KINDS = (REFRESH, ACCEPT)


@dataclass(frozen=True, slots=True)
class Ticket:
    """Handle for one in-flight operation, returned by ``InFlight.begin``."""

    kind: str
    serial: int


class InFlight:
    """Explicit set of active operations."""

    def __init__(self) -> None:
        self._active: dict[int, Ticket] = {}
        self._serials = itertools.count(1)

    @property
    def idle(self) -> bool:
        return not self._active

    def __len__(self) -> int:
        return len(self._active)

    def begin(self, kind: str) -> Ticket:
        if kind not in OPERATION_KINDS:
            raise ValueError(f"unknown operation kind: {kind!r}")
        ticket = Ticket(kind, next(self._serials))
        self._active[ticket.serial] = ticket
        return ticket

    def end(self, ticket: Ticket | None) -> None:
        """Release a ticket. Unknown or already-released tickets are ignored."""
        if ticket is not None:
            self._active.pop(ticket.serial, None)

    def counts(self) -> Counter[str]:
        return Counter(t.kind for t in self._active.values())


__all__ = [
    "ACCEPT",
    "OPERATION_KINDS",
    "REFRESH",
    "InFlight",
    "Ticket",
]
