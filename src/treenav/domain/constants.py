from __future__ import annotations

"""
Domain Constants.

Provides centralized access to application-wide constants: versioning,
default generator parameters and display settings.
"""

from typing import Dict, Tuple

APP_NAME = "TreeNav"
CURRENT_CONFIG_VERSION = "1.1.0"

# Shape of the tree generated when no persisted tree is available
DEFAULT_BRANCHING_FACTOR = 2
DEFAULT_DEPTH = 8

# Generator limits accepted from user input (CLI/GUI)
MAX_BRANCHING_FACTOR = 16
MAX_DEPTH = 32
# Upper bound on generated nodes (leaves included); larger shapes get a smaller depth
MAX_NODES = 100_000
# Lower bound for the GUI, which builds one frame and one button per Branch
MAX_GUI_NODES = 2_000

# -----------------------------------------------------------------------------
# DISPLAY
# -----------------------------------------------------------------------------
APPEARANCE_MODES: Tuple[str, ...] = ("System", "Light", "Dark")
DEFAULT_APPEARANCE_MODE = "System"
DEFAULT_COLOR_THEME = "blue"

CURSOR_BORDER_COLOR = "#E04F5F"
NODE_BORDER_COLOR = "gray50"
NODE_INNER_PADDING = 12

# Arrow keys routed to navigator directions
KEY_BINDINGS: Dict[str, str] = {
    "<Left>": "left",
    "<Right>": "right",
    "<Up>": "up",
    "<Down>": "down",
}

# Tk widget classes that consume arrow keys themselves (caret movement)
TEXT_INPUT_WIDGET_CLASSES: Tuple[str, ...] = ("Entry", "TEntry", "Text", "Spinbox", "TCombobox")
