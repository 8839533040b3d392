"""Internal service layer for backend access."""

from subboard.services.backend_service import fetch_pending_papers, submit_accept
from subboard.services.interfaces import HttpPaperBackend, PaperBackend

__all__ = [
    "HttpPaperBackend",
    "PaperBackend",
    "fetch_pending_papers",
    "submit_accept",
]
