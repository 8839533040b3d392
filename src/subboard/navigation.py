"""Keyboard navigation over the newest-first paper order."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from subboard.models import Paper


@dataclass(slots=True)
class Selection:
    """Selected paper id plus the neighbours captured when it was opened."""

    target: int | None = None
    before: int | None = None
    after: int | None = None

    def open(self, before: int | None, target: int, after: int | None) -> None:
        self.target = target
        self.before = before
        self.after = after

    def clear(self) -> None:
        self.target = None
        self.before = None
        self.after = None


def _position(ordered: Sequence[Paper], pid: int) -> int | None:
    for index, paper in enumerate(ordered):
        if paper.pid == pid:
            return index
    return None


def neighbors(ordered: Sequence[Paper], pid: int) -> tuple[int | None, int | None]:
    """Return the ids immediately before and after ``pid`` in ``ordered``.

    Both are None when ``pid`` is not present.
    """
    pos = _position(ordered, pid)
    if pos is None:
        return None, None
    before = ordered[pos - 1].pid if pos > 0 else None
    after = ordered[pos + 1].pid if pos + 1 < len(ordered) else None
    return before, after


def previous(ordered: Sequence[Paper], pid: int) -> int | None:
    return neighbors(ordered, pid)[0]


def next_of(ordered: Sequence[Paper], pid: int) -> int | None:
    return neighbors(ordered, pid)[1]


def move_up(selection: Selection, ordered: Sequence[Paper]) -> bool:
    """Select the captured predecessor. Returns False when there is none.

    The new predecessor comes from the live order; the old target becomes the
    successor.
    """
    current, target = selection.target, selection.before
    if current is None or target is None:
        return False
    selection.open(previous(ordered, target), target, current)
    return True


def move_down(selection: Selection, ordered: Sequence[Paper]) -> bool:
    """Select the captured successor. Returns False when there is none."""
    current, target = selection.target, selection.after
    if current is None or target is None:
        return False
    selection.open(current, target, next_of(ordered, target))
    return True


__all__ = [
    "Selection",
    "move_down",
    "move_up",
    "neighbors",
    "next_of",
    "previous",
]
