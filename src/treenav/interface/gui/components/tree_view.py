from __future__ import annotations

"""
Tree Canvas Component.

Draws the render instruction stream as nested bordered frames inside a
scrollable area: every node owns a frame holding its button followed by
the frames of its children. The cursor node's frame is outlined in red.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import customtkinter as ctk

from treenav.core.navigation.traversal import RenderInstruction
from treenav.domain import constants as const
from treenav.domain.path_models import EMPTY_PATH, Path

logger = logging.getLogger(__name__)


class TreeViewFrame(ctk.CTkScrollableFrame):
    """
    Scrollable display of the tree.

    Widgets are keyed by the leaf-to-root node Path; the root-to-leaf click
    target is only built when a node is clicked. When a render pass carries
    the same set of nodes as the previous one (a cursor move), only the
    borders are recolored; otherwise the widget hierarchy is rebuilt.
    """

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, **kwargs)
        self._frames: Dict[Path, ctk.CTkFrame] = {}
        self._cursor_path: Optional[Path] = None

    def render(
            self,
            instructions: List[RenderInstruction],
            on_click: Callable[[Path], None]
    ) -> None:
        """
        Draw one traversal pass.

        Args:
            instructions: Pre-order render instructions.
            on_click: Called with the node Path when a node button is clicked.
        """
        if self._same_nodes(instructions):
            self._recolor(instructions)
        else:
            self._rebuild(instructions, on_click)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _same_nodes(self, instructions: List[RenderInstruction]) -> bool:
        if len(instructions) != len(self._frames):
            return False
        return all(ins.rev_path in self._frames for ins in instructions)

    def _recolor(self, instructions: List[RenderInstruction]) -> None:
        old = self._frames.get(self._cursor_path)
        if old is not None:
            old.configure(border_color=const.NODE_BORDER_COLOR)

        self._cursor_path = None
        for ins in instructions:
            if ins.is_cursor:
                self._frames[ins.rev_path].configure(border_color=const.CURSOR_BORDER_COLOR)
                self._cursor_path = ins.rev_path
                break

    def _rebuild(
            self,
            instructions: List[RenderInstruction],
            on_click: Callable[[Path], None]
    ) -> None:
        # Destroying the root frame destroys every nested frame.
        root_frame = self._frames.get(EMPTY_PATH)
        if root_frame is not None:
            root_frame.destroy()
        self._frames = {}
        self._cursor_path = None

        for ins in instructions:
            container = self if ins.depth == 0 else self._frames[ins.parent_rev_path]

            frame = ctk.CTkFrame(
                container,
                border_width=1,
                border_color=const.CURSOR_BORDER_COLOR if ins.is_cursor else const.NODE_BORDER_COLOR,
                fg_color="transparent",
            )
            frame.pack(
                fill="x",
                padx=const.NODE_INNER_PADDING,
                pady=(const.NODE_INNER_PADDING // 2, 0) if ins.depth else 4,
            )

            button = ctk.CTkButton(
                frame,
                text=str(ins.label),
                width=40,
                command=lambda i=ins: on_click(i.path),
            )
            button.pack(anchor="w", padx=8, pady=8)

            self._frames[ins.rev_path] = frame
            if ins.is_cursor:
                self._cursor_path = ins.rev_path

        logger.debug(f"UI: Rebuilt tree view with {len(self._frames)} nodes")
