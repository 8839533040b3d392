"""Shared test fixtures for SubBoard tests."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from subboard.models import ConsoleConfig, Decision, Paper

BASE_TIME = datetime(2024, 1, 15, 9, 0, tzinfo=UTC)


# ── Factories ────────────────────────────────────────────────────────────────


@pytest.fixture
def make_paper():
    """Factory fixture for Paper instances; ``offset`` is minutes after BASE_TIME."""

    def _make(
        pid: int = 1,
        offset: int = 0,
        name: str | None = None,
        info: str = "Test submission",
        email: str | None = "author@example.org",
        color: str = "#a6e22e",
        decision: Decision = Decision.PENDING,
    ) -> Paper:
        return Paper(
            pid=pid,
            name=name if name is not None else f"Author {pid}",
            info=info,
            submitted_at=BASE_TIME + timedelta(minutes=offset),
            email=email,
            color=color,
            decision=decision,
        )

    return _make


@pytest.fixture
def make_payload():
    """Factory fixture for one pending-list JSON object."""

    def _make(pid: int = 1, offset: int = 0, **overrides: Any) -> dict[str, Any]:
        payload = {
            "pid": pid,
            "name": f"Author {pid}",
            "info": "Test submission",
            "time": (BASE_TIME + timedelta(minutes=offset)).isoformat(),
            "email": "author@example.org",
            "color": "#a6e22e",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def sample_config():
    """Factory fixture for ConsoleConfig with optional overrides."""

    def _make(**kwargs: Any) -> ConsoleConfig:
        values = {
            "host_url": "http://backend.test",
            "global_mapping": "/paper",
            "paper_need_process_mapping": "need-process",
            "process_paper_mapping": "process",
            "font": "Fira Sans",
        }
        values.update(kwargs)
        return ConsoleConfig(**values)

    return _make


# ── Backend double ───────────────────────────────────────────────────────────


class FakeBackend:
    """In-memory PaperBackend that records call overlap.

    ``hold()`` makes subsequent calls block until ``release()``; setting
    ``error`` makes them raise it instead of answering.
    """

    def __init__(self, papers: list[Paper] | None = None, accept_ok: bool = True) -> None:
        self.papers = list(papers or [])
        self.accept_ok = accept_ok
        self.fetch_calls = 0
        self.accept_calls: list[int] = []
        self.active = 0
        self.max_active = 0
        self._gate: asyncio.Event | None = None
        self.error: Exception | None = None

    def hold(self) -> None:
        self._gate = asyncio.Event()

    def release(self) -> None:
        if self._gate is not None:
            self._gate.set()
            self._gate = None

    async def _call(self) -> None:
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self._gate is not None:
                await self._gate.wait()
            else:
                await asyncio.sleep(0)
        finally:
            self.active -= 1
        if self.error is not None:
            raise self.error

    async def fetch_pending(self) -> list[Paper]:
        self.fetch_calls += 1
        await self._call()
        return [replace(paper) for paper in self.papers]

    async def accept(self, pid: int) -> bool:
        self.accept_calls.append(pid)
        await self._call()
        return self.accept_ok


@pytest.fixture
def fake_backend():
    """Factory fixture for FakeBackend instances."""

    def _make(papers: list[Paper] | None = None, accept_ok: bool = True) -> FakeBackend:
        return FakeBackend(papers, accept_ok)

    return _make
