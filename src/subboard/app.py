"""Textual host shell for the SubBoard moderation console.

The app owns no moderation logic. Every user or asynchronous event is turned
into a message for ``Dispatcher``; the commands it returns are run as tracked
asyncio tasks on the app's event loop, and each result is dispatched back in
the order it arrives. After every dispatch the widgets are re-rendered from
``ConsoleState``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import astuple

import httpx
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Header, Label, OptionList
from textual.widgets.option_list import Option

from subboard.action_messages import build_accept_failed_warning
from subboard.effects import failed_result, perform
from subboard.messages import (
    Accept,
    Accepted,
    ClearDecided,
    Command,
    KeyPressed,
    ManualRefresh,
    Message,
    OpenPaper,
    RefreshLoop,
    SwitchSplitAxis,
    ToggleAccent,
    ToggleDarkMode,
)
from subboard.models import INITIAL_REFRESH_DELAY, ConsoleConfig
from subboard.services.interfaces import HttpPaperBackend, PaperBackend
from subboard.ui_constants import APP_BINDINGS, APP_CSS, STATUS_HINT
from subboard.update import (
    ACCEPT_KEYS,
    DOWN_KEYS,
    UP_KEYS,
    AcceptPhase,
    ConsoleState,
    Dispatcher,
)
from subboard.widgets import PaperDetails, render_list_header, render_paper_option

logger = logging.getLogger(__name__)

APP_TITLE = "SubBoard"
DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"


class SubBoard(App):
    """Operator console for a moderation queue."""

    TITLE = APP_TITLE

    CSS = APP_CSS

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        config: ConsoleConfig | None = None,
        *,
        backend: PaperBackend | None = None,
        dispatcher: Dispatcher | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        super().__init__()
        if config is None and backend is None:
            raise ValueError("SubBoard needs a config or an explicit backend")
        self._config = config
        self._backend = backend
        self._dispatcher = dispatcher or Dispatcher()
        self._sleep = sleep

        # Shared HTTP client, created in on_mount when no backend was injected
        self._http_client: httpx.AsyncClient | None = None

        # Commands currently running on the event loop
        self._command_tasks: set[asyncio.Task[None]] = set()

        # Paper ids in the order last shown in the list
        self._rendered_ids: list[int] = []

    @property
    def state(self) -> ConsoleState:
        return self._dispatcher.state

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-container"):
            with Vertical(id="left-pane"):
                yield Label(render_list_header(0, 0, False), id="list-header")
                yield OptionList(id="paper-list")
            with Vertical(id="right-pane"):
                with VerticalScroll(id="details-scroll"):
                    yield PaperDetails(id="paper-details")
                yield Button("Accept", id="accept-button", variant="success")
        yield Label(STATUS_HINT, id="status-bar")

    def on_mount(self) -> None:
        """Build the backend if needed and start the refresh loop."""
        if self._backend is None:
            assert self._config is not None
            self._http_client = httpx.AsyncClient()
            backend = HttpPaperBackend.from_config(self._config, self._http_client)
            logger.debug("Polling %s, accepting via %s", *astuple(backend.endpoints))
            self._backend = backend
        self.send(RefreshLoop(INITIAL_REFRESH_DELAY))
        self.set_focus(self.query_one("#paper-list", OptionList))

    async def on_unmount(self) -> None:
        """Stop in-flight commands, then release the HTTP client."""
        await self._cancel_commands()
        client, self._http_client = self._http_client, None
        if client is None:
            return
        try:
            await client.aclose()
        except (httpx.HTTPError, RuntimeError) as exc:
            logger.debug("HTTP client did not close cleanly: %s", exc, exc_info=True)

    async def _cancel_commands(self) -> None:
        running = {task for task in self._command_tasks if not task.done()}
        self._command_tasks.clear()
        if not running:
            return
        for task in running:
            task.cancel()
        _, stuck = await asyncio.wait(running, timeout=0.5)
        if stuck:
            logger.debug("%d command task(s) still running at shutdown", len(stuck))

    # ── Dispatch plumbing ────────────────────────────────────────────────────

    def send(self, message: Message) -> None:
        """Dispatch a message, launch the resulting commands, and re-render."""
        for command in self._dispatcher.dispatch(message):
            self._spawn(command)
        for notice in self.state.drain_notices():
            self.notify(notice, title=APP_TITLE)
        self._render_state()

    def _spawn(self, command: Command) -> asyncio.Task[None]:
        """Run a command as a task; the set keeps a strong reference until it ends."""
        task = asyncio.create_task(
            self._run_command(command), name=f"subboard-{type(command).__name__}"
        )
        self._command_tasks.add(task)
        task.add_done_callback(self._command_finished)
        return task

    def _command_finished(self, task: asyncio.Task[None]) -> None:
        self._command_tasks.discard(task)
        if task.cancelled():
            return
        if (exc := task.exception()) is not None:
            logger.error("Command task %s crashed: %s", task.get_name(), exc, exc_info=exc)

    async def _run_command(self, command: Command) -> None:
        backend = self._backend
        assert backend is not None
        try:
            result = await perform(command, backend, sleep=self._sleep)
        except Exception:
            # The result message must still arrive or its ticket stays in flight
            logger.exception("Command %r raised; dispatching its failure result", command)
            result = failed_result(command)
        if isinstance(result, Accepted) and not result.ok:
            self.notify(
                build_accept_failed_warning(result.pid), severity="warning", title=APP_TITLE
            )
        self.send(result)

    # ── Rendering ────────────────────────────────────────────────────────────

    def _render_state(self) -> None:
        state = self.state
        selected = state.store.get(state.selection.target)
        self.title = f"{APP_TITLE} - Paper from {selected.name}" if selected else APP_TITLE

        wanted_theme = DARK_THEME if state.dark_mode else LIGHT_THEME
        if self.theme != wanted_theme:
            self.theme = wanted_theme

        try:
            self.query_one("#main-container").set_class(
                not state.split_vertical, "split-horizontal"
            )
            self._render_list()
            self._render_details()
        except NoMatches:
            return  # Widget tree torn down during shutdown

    def _render_list(self) -> None:
        state = self.state
        ordered = state.store.ordered_descending()
        self.query_one("#list-header", Label).update(
            render_list_header(len(state.store), state.store.pending_count(), state.busy)
        )
        option_list = self.query_one("#paper-list", OptionList)
        option_list.clear_options()
        option_list.add_options(
            [
                Option(
                    render_paper_option(
                        paper,
                        selected=paper.pid == state.selection.target,
                        submitting=state.accepts.get(paper.pid) is AcceptPhase.SUBMITTING,
                    ),
                    id=str(paper.pid),
                )
                for paper in ordered
            ]
        )
        self._rendered_ids = [paper.pid for paper in ordered]
        if state.selection.target in self._rendered_ids:
            option_list.highlighted = self._rendered_ids.index(state.selection.target)

    def _render_details(self) -> None:
        state = self.state
        paper = state.store.get(state.selection.target)
        submitting = (
            paper is not None and state.accepts.get(paper.pid) is AcceptPhase.SUBMITTING
        )
        self.query_one("#paper-details", PaperDetails).update_paper(
            paper, show_accent=state.show_accent, submitting=submitting
        )
        self.query_one("#accept-button", Button).set_class(
            paper is not None and paper.is_pending and not submitting, "visible"
        )

    # ── Events and actions ───────────────────────────────────────────────────

    @on(OptionList.OptionSelected, "#paper-list")
    def on_paper_selected(self, event: OptionList.OptionSelected) -> None:
        """Open the clicked paper, capturing its neighbours as displayed."""
        self._open_index(event.option_index)

    def _open_index(self, idx: int) -> None:
        ids = self._rendered_ids
        if not 0 <= idx < len(ids):
            return
        before = ids[idx - 1] if idx > 0 else None
        after = ids[idx + 1] if idx + 1 < len(ids) else None
        self.send(OpenPaper(before=before, target=ids[idx], after=after))

    @on(Button.Pressed, "#accept-button")
    def on_accept_pressed(self, event: Button.Pressed) -> None:
        target = self.state.selection.target
        if target is not None:
            self.send(Accept(target))

    def action_key_message(self, key: str) -> None:
        if self.state.selection.target is None and self._rendered_ids:
            # Nothing open yet: the keys drive the list cursor and enter opens
            option_list = self.query_one("#paper-list", OptionList)
            if key in UP_KEYS:
                option_list.action_cursor_up()
                return
            if key in DOWN_KEYS:
                option_list.action_cursor_down()
                return
            if key in ACCEPT_KEYS:
                self._open_index(option_list.highlighted or 0)
                return
        self.send(KeyPressed(key))

    def action_manual_refresh(self) -> None:
        self.send(ManualRefresh())

    def action_clear_decided(self) -> None:
        self.send(ClearDecided())

    def action_toggle_accent(self) -> None:
        self.send(ToggleAccent())

    def action_switch_split_axis(self) -> None:
        self.send(SwitchSplitAxis())

    def action_toggle_dark_mode(self) -> None:
        self.send(ToggleDarkMode())


__all__ = [
    "APP_TITLE",
    "SubBoard",
]
