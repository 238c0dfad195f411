"""Frame content as rich ``Text``.

Every function here is pure: it reads state and returns text, so the
widgets in the dashboard only ever call ``update()`` with the result.
"""

from __future__ import annotations

from datetime import datetime

from rich.text import Text

from projtabs.config import DATE_FORMAT, EDITORS, OWNER_LABEL, TIME_FORMAT, Colors
from projtabs.listing import Entry

DIR_ICON = "📁"
FILE_ICON = "📄"

CONFIRM_PROMPT = "Open in Neovim? (y/n)"


def header_cells(now: datetime) -> tuple[str, str, str]:
    """(date, label, time) for the three header cells."""
    return now.strftime(DATE_FORMAT), OWNER_LABEL, now.strftime(TIME_FORMAT)


def tab_strip(tabs: list[str], current: int) -> Text:
    text = Text()
    if not tabs:
        text.append("No projects found", style=Colors.DIM)
        return text

    for i, name in enumerate(tabs):
        if i:
            text.append(" │ ", style=Colors.BORDER)
        style = f"bold {Colors.YELLOW}" if i == current else Colors.WHITE
        text.append(f"{i + 1}_{name}", style=style)
    return text


def legend(flow: str) -> Text:
    """Keyboard legend for the given popup flow."""
    if flow == "editor":
        keys = [
            ("1-9", "Switch Tabs"),
            ("↑/↓", "Navigate"),
            ("Enter/o", "Editor"),
            ("Esc", "Close"),
            ("l", "Log"),
            ("q", "Quit"),
        ]
    else:
        keys = [
            ("1-9", "Switch Tabs"),
            ("↑/↓", "Navigate"),
            ("Enter", "Select"),
            ("y/n", "Confirm"),
            ("o", "Editor"),
            ("Esc", "Close"),
            ("l", "Log"),
            ("q", "Quit"),
        ]

    text = Text()
    for i, (key, label) in enumerate(keys):
        if i:
            text.append(" | ", style=Colors.WHITE)
        text.append(key, style=Colors.YELLOW)
        text.append(f": {label}", style=Colors.WHITE)
    return text


def content_title(tabs: list[str], current: int) -> str:
    if not tabs:
        return ""
    return f" Contents of {tabs[current]} "


def entry_list(entries: list[Entry], selected: int | None) -> Text:
    """One line per entry; the selected one in bold yellow."""
    text = Text()
    if not entries:
        text.append("(empty)", style=Colors.DIM)
        return text

    for index, entry in enumerate(entries):
        if index:
            text.append("\n")
        if entry.is_dir:
            icon, color = DIR_ICON, Colors.CYAN
        else:
            icon, color = FILE_ICON, Colors.WHITE
        style = f"bold {Colors.YELLOW}" if index == selected else color
        text.append(f"{icon} ")
        text.append(entry.name, style=style)
    return text


def confirm_prompt() -> Text:
    return Text(CONFIRM_PROMPT, style=Colors.YELLOW)


def editor_choice(chosen: int) -> Text:
    text = Text()
    for i, name in enumerate(EDITORS):
        if i:
            text.append("\n")
        if i == chosen:
            text.append(f"▶ {name}", style=f"bold {Colors.YELLOW}")
        else:
            text.append(f"  {name}", style=Colors.WHITE)
    return text
