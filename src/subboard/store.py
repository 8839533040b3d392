"""Client-side record set keyed by paper id."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from subboard.models import Decision, Paper


class PaperStore:
    """Authoritative local copy of the backend's papers.

    Grows only through refresh batches (last write wins per ``pid``) and
    shrinks only through ``clear_decided``.
    """

    def __init__(self) -> None:
        self._papers: dict[int, Paper] = {}

    def __len__(self) -> int:
        return len(self._papers)

    def __contains__(self, pid: object) -> bool:
        return pid in self._papers

    def __iter__(self) -> Iterator[Paper]:
        return iter(self._papers.values())

    def upsert(self, batch: Iterable[Paper]) -> None:
        """Insert or fully overwrite each paper by ``pid``."""
        for paper in batch:
            self._papers[paper.pid] = paper

    def get(self, pid: int | None) -> Paper | None:
        if pid is None:
            return None
        return self._papers.get(pid)

    def set_decision(self, pid: int, decision: Decision) -> bool:
        """Record a provisional local decision. Returns False for unknown ids."""
        paper = self._papers.get(pid)
        if paper is None:
            return False
        paper.decision = decision
        return True

    def clear_decided(self) -> None:
        """Drop every paper that is no longer pending."""
        self._papers = {pid: p for pid, p in self._papers.items() if p.is_pending}

    def pending_count(self) -> int:
        return sum(1 for p in self._papers.values() if p.is_pending)

    def ordered_descending(self) -> list[Paper]:
        """Return papers newest first; equal timestamps keep insertion order."""
        # sorted() is stable, and reverse=True preserves the relative order of ties
        return sorted(self._papers.values(), key=lambda p: p.submitted_at, reverse=True)


__all__ = ["PaperStore"]
