"""projtabs: a terminal dashboard of project tabs with an editor launcher."""

__version__ = "0.1.0"
