"""Build-time settings for the dashboard.

There is no config file and no environment lookup: edit these constants
and reinstall.
"""

# Project tabs are the immediate subdirectories of this directory.
BASE_PATH = "~/Documents/rakesh/projects"

# Middle cell of the header row.
OWNER_LABEL = "Rakesh"

# Seconds between clock refreshes.
REFRESH_INTERVAL = 0.1

# "confirm": Enter asks "Open in Neovim? (y/n)".
# "editor": Enter opens the VSCode / Neovim chooser.
POPUP_FLOW = "confirm"

CONTENT_VISIBLE_ON_START = True

EDITORS = ("VSCode", "Neovim")

TERMINAL_COMMAND = ["alacritty", "-e"]
NEOVIM_COMMAND = ["nvim"]
VSCODE_COMMAND = ["code"]

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


# ── Colors ──────────────────────────────────────────────────────────────

class Colors:
    BG = "#0a0a0a"
    BG_PANEL = "#111111"
    BORDER = "#333333"

    YELLOW = "#ffd600"
    ORANGE = "#ff9800"
    GREEN = "#00c853"
    RED = "#f44336"
    CYAN = "#00bcd4"
    WHITE = "#ffffff"
    GRAY = "#888888"
    DIM = "#555555"
