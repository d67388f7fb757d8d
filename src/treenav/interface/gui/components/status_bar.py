from __future__ import annotations

"""
Status Bar Component.

Shows the current cursor path, the number of rendered nodes and the most
recent log message below the tree.
"""

from typing import Any

import customtkinter as ctk


class StatusBar(ctk.CTkFrame):
    """Single-row information strip."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, height=28, corner_radius=0, **kwargs)
        self.grid_columnconfigure(1, weight=1)

        self.cursor_label = ctk.CTkLabel(self, text="Cursor: []", anchor="w")
        self.cursor_label.grid(row=0, column=0, padx=(12, 24), sticky="w")

        self.message_label = ctk.CTkLabel(self, text="", anchor="e", text_color="gray")
        self.message_label.grid(row=0, column=1, padx=12, sticky="e")

    def show_cursor(self, cursor_text: str, node_count: int) -> None:
        """Display the cursor path and the rendered node count."""
        self.cursor_label.configure(text=f"Cursor: {cursor_text}   |   Nodes: {node_count}")

    def show_message(self, msg: str) -> None:
        """Display a short log message."""
        self.message_label.configure(text=msg)
