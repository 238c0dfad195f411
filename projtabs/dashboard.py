#!/usr/bin/env python3
"""Project Tabs: Textual TUI dashboard.

Shows the directories under the projects folder as numbered tabs, lists
the active project's contents, and opens the selected entry in an
external editor. Header row carries the date and a running clock.
"""

from __future__ import annotations

import sys
from datetime import datetime

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import RichLog, Static

from projtabs import config
from projtabs.config import Colors
from projtabs.launcher import LaunchRequest, launch
from projtabs.render import (
    confirm_prompt,
    content_title,
    editor_choice,
    entry_list,
    header_cells,
    legend,
    tab_strip,
)
from projtabs.state import Browser, Popup


# ── Tab Strip ───────────────────────────────────────────────────────────

class TabStrip(Static):
    """Numbered project tabs, active one highlighted."""

    tabs = reactive([])
    current = reactive(0)

    def render(self) -> Text:
        return tab_strip(self.tabs, self.current)


# ── Legend ──────────────────────────────────────────────────────────────

class Legend(Static):
    """Keyboard shortcuts for the active flow."""

    flow = reactive("confirm")

    def render(self) -> Text:
        return legend(self.flow)


# ── Content Panel ───────────────────────────────────────────────────────

class ContentPanel(Static):
    """Entries of the active project."""

    entries = reactive([])
    selected = reactive(None)

    def render(self) -> Text:
        return entry_list(self.entries, self.selected)


# ── Popup ───────────────────────────────────────────────────────────────

class PopupScreen(ModalScreen):
    """Centered overlay for the confirmation and editor-choice popups."""

    DEFAULT_CSS = """
    PopupScreen {
        align: center middle;
    }

    #popup {
        width: 30%;
        height: 20%;
        border: solid #ffd600;
        background: #111111;
        padding: 0 1;
    }
    """

    def __init__(self, kind: Popup, body: Text, title: str = ""):
        super().__init__()
        self.kind = kind
        self._body = body
        self._title = title

    def compose(self) -> ComposeResult:
        yield Static(self._body, id="popup")

    def on_mount(self) -> None:
        self.query_one("#popup", Static).border_title = self._title

    def show(self, body: Text) -> None:
        self._body = body
        if self.is_mounted:
            self.query_one("#popup", Static).update(body)


# ── Main App ────────────────────────────────────────────────────────────

class ProjectTabsDashboard(App):
    """Project Tabs TUI Dashboard."""

    TITLE = "PROJECT TABS"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: #0a0a0a;
    }

    #header-row {
        height: 3;
    }

    #header-row Static {
        height: 3;
        border: solid #333333;
        padding: 0 1;
        color: #ffffff;
    }

    #date, #time {
        width: 33%;
    }

    #label {
        width: 34%;
        color: #ff9800;
    }

    TabStrip, Legend {
        height: 3;
        border: solid #333333;
        padding: 0 1;
    }

    #content-area {
        height: 1fr;
    }

    #content-scroll {
        height: 1fr;
        border: solid #333333;
        padding: 0 1;
    }

    ContentPanel {
        height: auto;
    }

    #event-log {
        height: 1fr;
        background: #0a0a0a;
        border: solid #333333;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        *[
            Binding(str(n), f"switch_tab({n - 1})", f"Tab {n}", show=False, priority=True)
            for n in range(1, 10)
        ],
        Binding("up", "cursor_up", "Up", show=False, priority=True),
        Binding("down", "cursor_down", "Down", show=False, priority=True),
        Binding("enter", "select", "Select", priority=True),
        Binding("y", "answer_yes", "Yes", show=False, priority=True),
        Binding("n", "answer_no", "No", show=False, priority=True),
        Binding("o", "editor_choice", "Editor", priority=True),
        Binding("escape", "close_popup", "Close", show=False, priority=True),
        Binding("l", "toggle_log", "Log", priority=True),
    ]

    def __init__(
        self,
        base_path: str = config.BASE_PATH,
        flow: str = config.POPUP_FLOW,
        show_content: bool = config.CONTENT_VISIBLE_ON_START,
        launcher=launch,
    ):
        super().__init__()
        # Reads the filesystem now, so a bad base path fails before the
        # terminal is taken over.
        self.browser = Browser(base_path, flow=flow, show_content=show_content)
        self._launcher = launcher
        self._popup_screen: PopupScreen | None = None
        self._show_log = False

    def compose(self) -> ComposeResult:
        with Horizontal(id="header-row"):
            yield Static(id="date")
            yield Static(id="label")
            yield Static(id="time")
        yield TabStrip(id="tab-strip")
        yield Legend(id="legend")
        with Vertical(id="content-area"):
            with VerticalScroll(id="content-scroll"):
                yield ContentPanel(id="content")
            yield RichLog(id="event-log", highlight=True, markup=True)

    def on_mount(self) -> None:
        """Draw the initial state and start the clock."""
        self._log(f"[bold {Colors.ORANGE}]Project Tabs started[/]")
        self._log(
            f"[{Colors.DIM}]{len(self.browser.tabs)} project(s) in "
            f"{escape(self.browser.base_path)}[/]"
        )
        self.query_one("#legend", Legend).flow = self.browser.flow

        self.query_one("#label", Static).update(config.OWNER_LABEL)
        self.set_interval(config.REFRESH_INTERVAL, self._update_clock)
        self._update_clock()
        self._refresh_view()

    def _log(self, msg: str) -> None:
        """Write a timestamped message to the event log."""
        ts = datetime.now().strftime("%H:%M:%S")
        self.query_one("#event-log", RichLog).write(f"[{Colors.DIM}]{ts}[/] {msg}")

    def _update_clock(self) -> None:
        date, _, clock = header_cells(datetime.now())
        self.query_one("#date", Static).update(date)
        self.query_one("#time", Static).update(clock)

    # ── Redraw ──────────────────────────────────────────────────────────

    def _refresh_view(self) -> None:
        """Push browser state into the widgets."""
        b = self.browser

        strip = self.query_one("#tab-strip", TabStrip)
        strip.tabs = list(b.tabs)
        strip.current = b.current_tab

        panel = self.query_one("#content", ContentPanel)
        panel.entries = list(b.entries)
        panel.selected = b.selected

        scroll = self.query_one("#content-scroll", VerticalScroll)
        scroll.border_title = content_title(b.tabs, b.current_tab)
        scroll.display = b.show_content and not self._show_log
        self.query_one("#event-log", RichLog).display = self._show_log
        self._keep_selection_visible(scroll)

        self._sync_popup()

    def _keep_selection_visible(self, scroll: VerticalScroll) -> None:
        selected = self.browser.selected
        if selected is None:
            scroll.scroll_home(animate=False)
            return
        height = scroll.scrollable_content_region.height
        if selected < scroll.scroll_y:
            scroll.scroll_to(y=selected, animate=False)
        elif height and selected >= scroll.scroll_y + height:
            scroll.scroll_to(y=selected - height + 1, animate=False)

    def _sync_popup(self) -> None:
        """Match the modal screen to ``browser.popup``."""
        kind = self.browser.popup
        current = self._popup_screen

        if current is not None and current.kind is not kind:
            if self.screen is current:
                self.pop_screen()
            self._popup_screen = current = None

        if kind is Popup.NONE:
            return

        if kind is Popup.EDITOR:
            body, title = editor_choice(self.browser.chosen_editor), "Select Editor"
        else:
            body, title = confirm_prompt(), ""

        if current is None:
            self._popup_screen = PopupScreen(kind, body, title)
            self.push_screen(self._popup_screen)
        else:
            current.show(body)

    # ── Actions ─────────────────────────────────────────────────────────

    def action_switch_tab(self, index: int) -> None:
        """Switch to project tab ``index``."""
        if self.browser.switch_tab(index):
            self._show_log = False
            project = self.browser.current_project
            self._log(
                f"[{Colors.CYAN}]Tab {index + 1}:[/] {escape(project)} "
                f"[{Colors.DIM}]({len(self.browser.entries)} entries)[/]"
            )
        self._refresh_view()

    def action_cursor_up(self) -> None:
        if self.browser.popup is Popup.EDITOR:
            self.browser.choose_editor(-1)
        else:
            self.browser.move_up()
        self._refresh_view()

    def action_cursor_down(self) -> None:
        if self.browser.popup is Popup.EDITOR:
            self.browser.choose_editor(1)
        else:
            self.browser.move_down()
        self._refresh_view()

    def action_select(self) -> None:
        """Enter: open the popup, or accept the one already open."""
        if self.browser.popup is Popup.NONE:
            self.browser.open_popup()
            self._refresh_view()
        else:
            self._accept()

    def action_answer_yes(self) -> None:
        if self.browser.popup is Popup.CONFIRM:
            self._accept()

    def action_answer_no(self) -> None:
        if self.browser.popup is Popup.CONFIRM:
            self.browser.cancel()
            self._refresh_view()

    def action_editor_choice(self) -> None:
        self.browser.open_editor_choice()
        self._refresh_view()

    def action_close_popup(self) -> None:
        self.browser.cancel()
        self._refresh_view()

    def action_toggle_log(self) -> None:
        """Swap the content pane for the event log and back."""
        if self.browser.popup is not Popup.NONE:
            return
        self._show_log = not self._show_log
        self._refresh_view()

    def _accept(self) -> None:
        request = self.browser.confirm()
        self._refresh_view()
        if request is not None:
            self._spawn(request)

    def _spawn(self, request: LaunchRequest) -> None:
        """Start the editor. Spawn failures are left to end the app."""
        self._log(f"[{Colors.CYAN}]Launching {escape(' '.join(request.command))}[/]")
        process = self._launcher(request)
        pid = getattr(process, "pid", None)
        self._log(f"[{Colors.GREEN}]Opened {escape(str(request.path))}[/] [{Colors.DIM}]pid {pid}[/]")

    def action_quit(self) -> None:
        """Quit the dashboard."""
        self.exit()


# ── Entry Point ─────────────────────────────────────────────────────────

def main() -> None:
    app = ProjectTabsDashboard()
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
