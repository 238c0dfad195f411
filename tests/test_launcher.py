"""Unit tests for projtabs.launcher: command shapes and spawning."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from projtabs.exceptions import LaunchError
from projtabs.launcher import LaunchRequest, editor_command, launch, terminal_editor_command

TARGET = Path("/home/me/projects/alpha/README.md")


class TestCommands:
    def test_terminal_editor_path_is_last(self) -> None:
        assert terminal_editor_command(TARGET) == ["alacritty", "-e", "nvim", str(TARGET)]

    def test_vscode_takes_path_only(self) -> None:
        assert editor_command("VSCode", TARGET) == ["code", str(TARGET)]

    def test_neovim_uses_terminal(self) -> None:
        assert editor_command("Neovim", TARGET) == terminal_editor_command(TARGET)

    def test_unknown_editor(self) -> None:
        with pytest.raises(ValueError):
            editor_command("Emacs", TARGET)


class TestLaunch:
    def test_spawns_detached_without_waiting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        class FakePopen:
            pid = 4242

            def __init__(self, args, **kwargs):
                calls.append((args, kwargs))

            def wait(self):
                raise AssertionError("launch must not wait on the child")

        monkeypatch.setattr(subprocess, "Popen", FakePopen)
        process = launch(LaunchRequest(command=["code", str(TARGET)], path=TARGET))

        assert process.pid == 4242
        args, kwargs = calls[0]
        assert args == ["code", str(TARGET)]
        assert kwargs["start_new_session"] is True
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL

    def test_missing_command_raises(self) -> None:
        request = LaunchRequest(command=["projtabs-no-such-editor-xyz", str(TARGET)], path=TARGET)
        with pytest.raises(LaunchError, match="projtabs-no-such-editor-xyz"):
            launch(request)
