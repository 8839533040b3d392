"""Detail pane widget for the selected paper."""

from __future__ import annotations

from email.utils import format_datetime

from rich.markup import escape as escape_markup
from textual.widgets import Static

from subboard.models import Decision, Paper
from subboard.parsing import parse_accent_color

_DECISION_LABELS: dict[Decision, str] = {
    Decision.PENDING: "[dim]Pending[/]",
    Decision.ACCEPTED: "[green]Accepted[/]",
    Decision.REJECTED: "[red]Rejected[/]",
}


def render_paper_details(
    paper: Paper,
    *,
    show_accent: bool = True,
    submitting: bool = False,
) -> str:
    """Build detail-pane markup for one paper."""
    safe_info = escape_markup(paper.info)
    if show_accent:
        color = parse_accent_color(paper.color)
        info_line = f"[black on {color}]  {safe_info}  [/]"
    else:
        info_line = f"[bold]  {safe_info}  [/]"

    lines = [
        "",
        info_line,
        "",
        f"[bold]Name:[/] {escape_markup(paper.name)}",
    ]
    if paper.email:
        lines.append(f"[bold]Email:[/] {escape_markup(paper.email)}")
    # \u2026 renders as a trailing ellipsis
    status = "[yellow]Submitting\u2026[/]" if submitting else _DECISION_LABELS[paper.decision]
    lines.append(f"[bold]Status:[/] {status}")
    lines.append(f"[dim]{format_datetime(paper.submitted_at)}[/]")
    return "\n".join(lines)


class PaperDetails(Static):
    """Widget to display the selected paper."""

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id)
        self._paper: Paper | None = None

    @property
    def paper(self) -> Paper | None:
        return self._paper

    def update_paper(
        self,
        paper: Paper | None,
        *,
        show_accent: bool = True,
        submitting: bool = False,
    ) -> None:
        """Update the displayed paper details."""
        self._paper = paper
        if paper is None:
            self.update("[dim italic]Select a paper to view details[/]")
            return
        self.update(render_paper_details(paper, show_accent=show_accent, submitting=submitting))


__all__ = [
    "PaperDetails",
    "render_paper_details",
]
