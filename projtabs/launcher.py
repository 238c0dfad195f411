"""Spawn the external editor on a selected path.

Launches are fire-and-forget: the child runs in its own session with its
standard streams detached, and nobody waits for it.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from projtabs import config
from projtabs.exceptions import LaunchError


@dataclass(frozen=True)
class LaunchRequest:
    command: list[str]
    path: Path


def terminal_editor_command(path: Path) -> list[str]:
    """Neovim inside a terminal emulator window."""
    return [*config.TERMINAL_COMMAND, *config.NEOVIM_COMMAND, str(path)]


def editor_command(editor: str, path: Path) -> list[str]:
    """Command line for one of ``config.EDITORS``."""
    if editor == "VSCode":
        return [*config.VSCODE_COMMAND, str(path)]
    if editor == "Neovim":
        return terminal_editor_command(path)
    raise ValueError(f"Unknown editor: {editor}")


def launch(request: LaunchRequest) -> subprocess.Popen:
    """Start the command and return without waiting on it."""
    try:
        return subprocess.Popen(
            request.command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise LaunchError(f"Cannot run {request.command[0]}: {e.strerror or e}") from e
