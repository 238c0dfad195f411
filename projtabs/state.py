"""Browser state and its key-driven transitions.

No Textual imports here: the dashboard maps keys onto these methods and
redraws from the result.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from projtabs import config
from projtabs.launcher import LaunchRequest, editor_command, terminal_editor_command
from projtabs.listing import Entry, entry_path, expand_home, list_entries, list_projects


class Popup(Enum):
    NONE = "none"
    CONFIRM = "confirm"
    EDITOR = "editor"


class Browser:
    """Tabs, the active project's entries, the cursor and popup flags."""

    def __init__(
        self,
        base_path: str = config.BASE_PATH,
        flow: str = config.POPUP_FLOW,
        show_content: bool = config.CONTENT_VISIBLE_ON_START,
    ):
        if flow not in ("confirm", "editor"):
            raise ValueError(f"Unknown popup flow: {flow}")
        self.base_path = base_path
        self.flow = flow
        self.tabs: list[str] = list_projects(base_path)
        self.current_tab = 0
        self.entries: list[Entry] = []
        self.selected: int | None = None
        self.show_content = show_content
        self.popup = Popup.NONE
        self.chosen_editor = 0
        self._load_entries()

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def current_project(self) -> str | None:
        if not self.tabs:
            return None
        return self.tabs[self.current_tab]

    @property
    def selected_entry(self) -> Entry | None:
        if self.selected is None:
            return None
        return self.entries[self.selected]

    def selected_path(self) -> Path | None:
        """Full path of the selected entry, or None."""
        entry = self.selected_entry
        if entry is None:
            return None
        return entry_path(self.base_path, self.current_project, entry.name)

    # ── Transitions ─────────────────────────────────────────────────────

    def _load_entries(self) -> None:
        if not self.tabs:
            return
        project_dir = expand_home(self.base_path) / self.tabs[self.current_tab]
        self.entries = list_entries(project_dir)

    def switch_tab(self, index: int) -> bool:
        """Activate tab ``index``. Returns False if nothing changed."""
        # Popups are modal: a digit must not swap the entry list under an
        # open confirmation, or "y" would launch an entry of another project.
        if self.popup is not Popup.NONE:
            return False
        if not 0 <= index < len(self.tabs):
            return False
        self.current_tab = index
        self.selected = None
        self._load_entries()
        self.show_content = True
        return True

    def move_up(self) -> None:
        if not self._cursor_active():
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected > 0:
            self.selected -= 1

    def move_down(self) -> None:
        if not self._cursor_active():
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected < len(self.entries) - 1:
            self.selected += 1

    def _cursor_active(self) -> bool:
        return self.show_content and self.popup is Popup.NONE and bool(self.entries)

    def open_popup(self) -> bool:
        """Enter on a selected entry: open the popup of the configured flow."""
        if self.flow == "editor":
            return self.open_editor_choice()
        if not self._can_open():
            return False
        self.popup = Popup.CONFIRM
        return True

    def open_editor_choice(self) -> bool:
        if not self._can_open():
            return False
        self.popup = Popup.EDITOR
        return True

    def _can_open(self) -> bool:
        return (
            self.show_content
            and self.popup is Popup.NONE
            and self.selected is not None
        )

    def choose_editor(self, delta: int) -> None:
        if self.popup is not Popup.EDITOR:
            return
        self.chosen_editor = max(0, min(len(config.EDITORS) - 1, self.chosen_editor + delta))

    def confirm(self) -> LaunchRequest | None:
        """Accept the open popup and close it.

        Returns what to launch, or None if no popup was open.
        """
        popup = self.popup
        if popup is Popup.NONE:
            return None
        self.popup = Popup.NONE
        path = self.selected_path()
        if path is None:
            return None
        if popup is Popup.EDITOR:
            command = editor_command(config.EDITORS[self.chosen_editor], path)
        else:
            command = terminal_editor_command(path)
        return LaunchRequest(command=command, path=path)

    def cancel(self) -> bool:
        if self.popup is Popup.NONE:
            return False
        self.popup = Popup.NONE
        return True
