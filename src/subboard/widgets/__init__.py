"""Widget classes and render helpers for the console UI."""

from subboard.widgets.details import PaperDetails, render_paper_details
from subboard.widgets.listing import decision_badge, render_list_header, render_paper_option

__all__ = [
    "PaperDetails",
    "decision_badge",
    "render_list_header",
    "render_paper_option",
    "render_paper_details",
]
