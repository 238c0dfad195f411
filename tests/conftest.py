"""Shared fixtures: a throwaway projects directory."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def projects_dir(tmp_path: Path) -> Path:
    """Base directory with projects ``alpha`` and ``beta`` and a stray file."""
    base = tmp_path / "projects"
    alpha = base / "alpha"
    beta = base / "beta"
    alpha.mkdir(parents=True)
    beta.mkdir()
    (base / "notes.txt").write_text("not a project")

    (alpha / "src").mkdir()
    (alpha / "docs").mkdir()
    (alpha / "README.md").write_text("alpha")
    (alpha / "Makefile").write_text("all:")

    (beta / "main.py").write_text("print('beta')")
    return base
