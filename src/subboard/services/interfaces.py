"""Backend interface + default httpx adapter for dependency injection."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

from subboard.models import ConsoleConfig, Endpoints, Paper
from subboard.services import backend_service as _backend

logger = logging.getLogger(__name__)


@runtime_checkable
class PaperBackend(Protocol):
    """Interface for the two backend calls the console makes."""

    async def fetch_pending(self) -> list[Paper]:
        """Fetch every paper; failures yield an empty list."""
        ...

    async def accept(self, pid: int) -> bool:
        """Accept one paper and return success."""
        ...


class HttpPaperBackend:
    """Default adapter holding the shared HTTP client and derived endpoints.

    Built once at startup and passed to whatever issues backend calls.
    """

    def __init__(
        self,
        endpoints: Endpoints,
        client: httpx.AsyncClient,
        *,
        accept_style: str = "query",
        timeout_seconds: float = _backend.BACKEND_TIMEOUT_SECONDS,
    ) -> None:
        self.endpoints = endpoints
        self.client = client
        self.accept_style = accept_style
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_config(cls, config: ConsoleConfig, client: httpx.AsyncClient) -> HttpPaperBackend:
        return cls(Endpoints.from_config(config), client, accept_style=config.accept_style)

    async def fetch_pending(self) -> list[Paper]:
        logger.info("refreshing papers")
        try:
            return await _backend.fetch_pending_papers(
                client=self.client,
                endpoints=self.endpoints,
                timeout_seconds=self.timeout_seconds,
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.error("Refresh from %s failed: %s", self.endpoints.pending_list, exc)
            return []

    async def accept(self, pid: int) -> bool:
        logger.info("accept paper %d", pid)
        try:
            await _backend.submit_accept(
                client=self.client,
                endpoints=self.endpoints,
                pid=pid,
                accept_style=self.accept_style,
                timeout_seconds=self.timeout_seconds,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Accept of paper %d failed: %s", pid, exc)
            return False
        return True


__all__ = [
    "HttpPaperBackend",
    "PaperBackend",
]
