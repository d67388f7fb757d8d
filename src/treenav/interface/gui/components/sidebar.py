from __future__ import annotations

"""
Sidebar Component.

Holds the generator controls (branching factor, depth, regenerate),
cursor shortcuts and the appearance selector.
"""

from typing import Any, Tuple

import customtkinter as ctk

from treenav.domain import constants as const


class SidebarFrame(ctk.CTkFrame):
    """
    Left control panel.

    Widgets are exposed as attributes; app.py wires their commands to the
    controller.
    """

    def __init__(self, master: Any, settings: dict, **kwargs: Any):
        """
        Build the panel.

        Args:
            master: Parent window container.
            settings: Validated app_settings used for initial values.
        """
        super().__init__(master, width=200, corner_radius=0, **kwargs)

        # -----------------------------------------------------------------------------
        # COMPONENT: BRANDING
        # -----------------------------------------------------------------------------
        self.logo_label = ctk.CTkLabel(
            self,
            text=const.APP_NAME,
            font=ctk.CTkFont(size=20, weight="bold")
        )
        self.logo_label.grid(row=0, column=0, padx=20, pady=(20, 4))

        self.version_label = ctk.CTkLabel(
            self,
            text=f"v{const.CURRENT_CONFIG_VERSION}",
            font=ctk.CTkFont(size=10),
            text_color="gray"
        )
        self.version_label.grid(row=1, column=0, padx=20, pady=(0, 20))

        # -----------------------------------------------------------------------------
        # COMPONENT: GENERATOR
        # -----------------------------------------------------------------------------
        ctk.CTkLabel(self, text="Branching factor").grid(row=2, column=0, padx=20, sticky="w")
        self.entry_branching = ctk.CTkEntry(self, width=160)
        self.entry_branching.grid(row=3, column=0, padx=20, pady=(0, 10))

        ctk.CTkLabel(self, text="Depth").grid(row=4, column=0, padx=20, sticky="w")
        self.entry_depth = ctk.CTkEntry(self, width=160)
        self.entry_depth.grid(row=5, column=0, padx=20, pady=(0, 10))

        self.btn_regenerate = ctk.CTkButton(self, text="Regenerate")
        self.btn_regenerate.grid(row=6, column=0, padx=20, pady=10)

        self.set_generator_values(settings["branching_factor"], settings["depth"])

        # -----------------------------------------------------------------------------
        # COMPONENT: CURSOR
        # -----------------------------------------------------------------------------
        self.btn_root = ctk.CTkButton(
            self,
            text="Cursor to root",
            fg_color="transparent",
            border_width=2,
            text_color=("gray10", "#DCE4EE")
        )
        self.btn_root.grid(row=7, column=0, padx=20, pady=10)

        self.grid_rowconfigure(8, weight=1)

        # -----------------------------------------------------------------------------
        # COMPONENT: APPEARANCE
        # -----------------------------------------------------------------------------
        self.combo_appearance = ctk.CTkOptionMenu(
            self,
            values=list(const.APPEARANCE_MODES),
        )
        self.combo_appearance.set(settings["appearance_mode"])
        self.combo_appearance.grid(row=9, column=0, padx=20, pady=(10, 20))

    def set_generator_values(self, branching: int, depth: int) -> None:
        """Show the given generator parameters in the entries."""
        for entry, value in ((self.entry_branching, branching), (self.entry_depth, depth)):
            entry.delete(0, "end")
            entry.insert(0, str(value))

    def get_generator_values(self) -> Tuple[str, str]:
        """Return the raw (branching, depth) texts."""
        return self.entry_branching.get(), self.entry_depth.get()

