"""projtabs exception hierarchy."""

from __future__ import annotations


class ProjtabsError(Exception):
    """Base exception for all projtabs errors."""


class ListingError(ProjtabsError):
    """Raised when a project or base directory cannot be read."""


class LaunchError(ProjtabsError):
    """Raised when the external editor command cannot be spawned."""
