"""Directory listing for the project tabs and their contents.

Only the immediate children of a directory are ever read.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from projtabs.exceptions import ListingError


@dataclass(frozen=True)
class Entry:
    """One immediate child of a project directory."""

    name: str
    is_dir: bool


def expand_home(path: str) -> Path:
    """Replace a leading ``~/`` with the home directory.

    Resolved on every call. If the home directory is unknown the path is
    returned as-is.
    """
    if path.startswith("~/"):
        try:
            home = Path.home()
        except (RuntimeError, KeyError):
            return Path(path)
        return home / path[2:]
    return Path(path)


def entry_path(base: str, project: str, name: str) -> Path:
    """Full path of ``name`` inside ``project`` under the base directory."""
    return expand_home(base) / project / name


def _scan(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        raise ListingError(f"Cannot read {directory}: {e.strerror or e}") from e


def _sort_key(entry: Entry) -> tuple[bool, str]:
    return (not entry.is_dir, entry.name)


def list_entries(directory: Path) -> list[Entry]:
    """Immediate entries of ``directory``, directories first, then by name."""
    entries = []
    for item in _scan(directory):
        try:
            is_dir = item.is_dir(follow_symlinks=False)
        except OSError as e:
            raise ListingError(f"Cannot stat {item.path}: {e.strerror or e}") from e
        entries.append(Entry(name=item.name, is_dir=is_dir))
    entries.sort(key=_sort_key)
    return entries


def list_projects(base: str) -> list[str]:
    """Names of the project directories under ``base``, sorted."""
    return [e.name for e in list_entries(expand_home(base)) if e.is_dir]
