"""Internal HTTP helpers for the moderation backend."""

from __future__ import annotations

import httpx

from subboard.models import Endpoints, Paper
from subboard.parsing import parse_paper_list

BACKEND_TIMEOUT_SECONDS = 30
USER_AGENT = "subboard/1.0"


async def fetch_pending_papers(
    *,
    client: httpx.AsyncClient,
    endpoints: Endpoints,
    timeout_seconds: float = BACKEND_TIMEOUT_SECONDS,
) -> list[Paper]:
    """GET the pending list and decode it.

    Raises ``httpx.HTTPError`` on transport or status failures and
    ``ValueError`` when the body is not a JSON array of papers.
    """
    response = await client.get(
        endpoints.pending_list,
        headers={"User-Agent": USER_AGENT},
        timeout=timeout_seconds,
    )
    response.raise_for_status()
    return parse_paper_list(response.json())


async def submit_accept(
    *,
    client: httpx.AsyncClient,
    endpoints: Endpoints,
    pid: int,
    accept_style: str = "query",
    timeout_seconds: float = BACKEND_TIMEOUT_SECONDS,
) -> None:
    """POST an accept decision for ``pid``. The response body is ignored.

    ``accept_style="json"`` sends ``{"pid": pid}`` as the body instead of a
    query parameter (older backends).
    """
    headers = {"User-Agent": USER_AGENT}
    if accept_style == "json":
        response = await client.post(
            endpoints.accept, json={"pid": pid}, headers=headers, timeout=timeout_seconds
        )
    else:
        response = await client.post(
            endpoints.accept, params={"pid": pid}, headers=headers, timeout=timeout_seconds
        )
    response.raise_for_status()


__all__ = [
    "BACKEND_TIMEOUT_SECONDS",
    "USER_AGENT",
    "fetch_pending_papers",
    "submit_accept",
]
