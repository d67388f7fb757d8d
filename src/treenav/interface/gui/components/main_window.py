from __future__ import annotations

"""
Main Application Window Factory.

Initializes the root CustomTkinter window, applies the persisted theme
settings and lays out the grid: sidebar on the left, tree canvas and
status bar on the right.
"""

from typing import Any, Dict

import customtkinter as ctk

from treenav.domain import constants as const

# -----------------------------------------------------------------------------
# ROOT WINDOW CONSTRUCTION
# -----------------------------------------------------------------------------

def create_main_window(settings: Dict[str, Any]) -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        settings: Validated app_settings block.

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(settings.get("appearance_mode", const.DEFAULT_APPEARANCE_MODE))
    ctk.set_default_color_theme(settings.get("color_theme", const.DEFAULT_COLOR_THEME))

    app = ctk.CTk()
    app.title(f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("1000x700")

    # Column 0 (Sidebar), Column 1 (Tree); Row 1 holds the status bar
    app.grid_columnconfigure(1, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app
