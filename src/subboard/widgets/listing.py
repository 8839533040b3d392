"""List rendering helpers for paper entries."""

from __future__ import annotations

from rich.markup import escape as escape_markup

from subboard.models import Decision, Paper

_DECISION_BADGES: dict[Decision, str] = {
    Decision.ACCEPTED: "[green]\u2714[/]",  # ✔
    Decision.REJECTED: "[red]\u2718[/]",  # ✘
}
_SUBMITTING_BADGE = "[yellow]\u2026[/]"  # …


def decision_badge(decision: Decision, submitting: bool = False) -> str:
    """Return the badge markup shown after a paper's title, or ``""``."""
    if submitting:
        return _SUBMITTING_BADGE
    return _DECISION_BADGES.get(decision, "")


def render_paper_option(paper: Paper, *, selected: bool = False, submitting: bool = False) -> str:
    """Render a paper as Rich markup for OptionList display."""
    text = f"{escape_markup(paper.name)}: {escape_markup(paper.info)}"
    if selected:
        text = f"[bold]{text}[/]"
    badge = decision_badge(paper.decision, submitting)
    return f"{text} {badge}" if badge else text


def render_list_header(total: int, pending: int, busy: bool) -> str:
    """Build the left-pane header line."""
    indicator = " [yellow]\u21bb[/]" if busy else ""  # ↻
    return f" PAPERS [dim]{pending} pending / {total} total[/]{indicator}"


__all__ = [
    "decision_badge",
    "render_list_header",
    "render_paper_option",
]
