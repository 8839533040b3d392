"""Internal UI constants for the SubBoard app."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_CSS = """
#main-container {
    height: 1fr;
    layout: horizontal;
}

#main-container.split-horizontal {
    layout: vertical;
}

#left-pane {
    width: 2fr;
    min-width: 30;
    height: 100%;
    border: tall $panel;
}

#main-container.split-horizontal #left-pane {
    width: 100%;
    height: 2fr;
}

#right-pane {
    width: 3fr;
    height: 100%;
    border: tall $panel;
    padding: 0 1;
}

#main-container.split-horizontal #right-pane {
    width: 100%;
    height: 3fr;
}

#left-pane:focus-within, #right-pane:focus-within {
    border: tall $accent;
}

#list-header {
    padding: 0 1;
    color: $text-muted;
    text-style: bold;
}

#paper-list {
    height: 1fr;
    scrollbar-gutter: stable;
}

#details-scroll {
    height: 1fr;
}

#accept-button {
    width: 100%;
    display: none;
}

#accept-button.visible {
    display: block;
}

#status-bar {
    padding: 0 1;
    color: $text-muted;
}
"""

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit", show=False),
    # Core navigation and accept; priority so the list widget does not consume them
    Binding("up", "key_message('up')", "Previous", show=False, priority=True),
    Binding("k", "key_message('k')", "Previous", show=False, priority=True),
    Binding("down", "key_message('down')", "Next", show=False, priority=True),
    Binding("j", "key_message('j')", "Next", show=False, priority=True),
    Binding("enter", "key_message('enter')", "Accept", show=False, priority=True),
    Binding("r", "manual_refresh", "Refresh", show=False),
    Binding("c", "clear_decided", "Clear Decided", show=False),
    Binding("b", "toggle_accent", "Accent", show=False),
    Binding("v", "switch_split_axis", "Split", show=False),
    Binding("ctrl+t", "toggle_dark_mode", "Theme", show=False),
]

STATUS_HINT = (
    "[dim]j/k[/] move  [dim]enter[/] accept  [dim]r[/] refresh  [dim]c[/] clear decided  "
    "[dim]b[/] accent  [dim]v[/] split  [dim]ctrl+t[/] theme  [dim]q[/] quit"
)

__all__ = [
    "APP_BINDINGS",
    "APP_CSS",
    "STATUS_HINT",
]
