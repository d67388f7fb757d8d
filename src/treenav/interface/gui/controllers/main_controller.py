from __future__ import annotations

"""
Main Application Controller.

Bridges the View (tree canvas, sidebar, status bar) and the navigation
core. Owns the only mutable process state, the current ContentState,
and replaces it wholesale on every move, click or regeneration before
asking the views to redraw.
"""

import logging
from typing import Any, Dict, List, Optional

from treenav.core.navigation.navigator import Direction, apply_move
from treenav.core.navigation.traversal import RenderInstruction, resolve_cursor, traverse
from treenav.domain import constants as const
from treenav.domain.path_models import EMPTY_PATH, Path
from treenav.domain.state_models import ContentState
from treenav.domain.tree_models import count_nodes, generate
from treenav.domain.validator import validate_settings

logger = logging.getLogger(__name__)

# ==============================================================================
# PRIMARY APPLICATION CONTROLLER
# ==============================================================================

class AppController:
    """
    Central controller class that bridges the UI (View) and the Core (Model).

    Views are duck-typed so the controller can be driven without a display:
    tree_view.render(instructions, on_click), status_view.show_cursor(text, nodes)
    and sidebar_view.set_generator_values(branching, depth).
    """

    def __init__(self, app: Any, content: ContentState, app_state: Dict[str, Any]):
        """
        Initialize the controller with application context and state.

        Args:
            app: Root application window (used for scheduling only).
            content: Tree and cursor to start from.
            app_state: Global persistent application state.
        """
        self.app = app
        self.content = content
        self.app_state = app_state
        self.last_instructions: List[RenderInstruction] = []

        # Shortcuts to registered View components
        self.tree_view: Any = None
        self.status_view: Any = None
        self.sidebar_view: Any = None

    # -------------------------------------------------------------------------
    # VIEW REGISTRATION
    # -------------------------------------------------------------------------

    def register_views(self, tree_view: Any, status_view: Any, sidebar_view: Any) -> None:
        """Link visual frame instances to the controller."""
        self.tree_view = tree_view
        self.status_view = status_view
        self.sidebar_view = sidebar_view

    # -------------------------------------------------------------------------
    # CURSOR COMMANDS
    # -------------------------------------------------------------------------

    def move(self, direction: Direction) -> Path:
        """
        Apply a directional command and redraw if the cursor changed.

        Args:
            direction: Direction member or its string value.

        Returns:
            Path: The cursor after the move.
        """
        new_cursor = apply_move(self.content.root, self.content.cursor, direction)
        if new_cursor != self.content.cursor:
            self.content = self.content.with_cursor(new_cursor)
            self.refresh()
        return self.content.cursor

    def on_key(self, event: Any, direction: Direction) -> Optional[Path]:
        """
        Handle an arrow key bound on the main window.

        Window bindings also fire while a sidebar entry has focus; those
        keystrokes belong to the entry's caret and are ignored here.

        Args:
            event: Tk event carrying the focused widget.
            direction: Direction bound to the key.

        Returns:
            Optional[Path]: The cursor after the move, or None if ignored.
        """
        widget = getattr(event, "widget", None)
        if widget is not None and hasattr(widget, "winfo_class"):
            if widget.winfo_class() in const.TEXT_INPUT_WIDGET_CLASSES:
                return None
        return self.move(direction)

    def set_cursor(self, path: Path) -> None:
        """
        Install the path of a clicked node as the new cursor.

        The path comes from the last render pass, so it addresses the
        current tree and is installed verbatim.
        """
        logger.debug(f"Controller: Cursor set by click to {path.to_list()}")
        self.content = self.content.with_cursor(path)
        self.refresh()

    def reset_cursor(self) -> None:
        """Move the cursor back to the root."""
        self.set_cursor(EMPTY_PATH)

    # -------------------------------------------------------------------------
    # TREE COMMANDS
    # -------------------------------------------------------------------------

    def regenerate(self, branching: Any, depth: Any) -> List[str]:
        """
        Replace the tree with a generated one and keep the cursor if it still fits.

        The shape is held to the GUI node budget, which is smaller than the
        one applied to headless runs.

        Args:
            branching: Raw branching factor (widget text or int).
            depth: Raw depth (widget text or int).

        Returns:
            List[str]: Warnings raised while normalizing the inputs.
        """
        settings = dict(self.app_state.get("app_settings", {}))
        settings.update({"branching_factor": branching, "depth": depth})
        warnings = self._install_generated(settings)
        self.refresh()
        return warnings

    def fit_to_view(self) -> bool:
        """
        Swap a restored tree that is too large to draw for a generated one.

        Trees saved by the CLI may exceed MAX_GUI_NODES. Call once after the
        views are registered and before the first refresh().

        Returns:
            bool: True if the tree was replaced.
        """
        nodes = count_nodes(self.content.root)
        if nodes <= const.MAX_GUI_NODES:
            return False

        logger.warning(
            f"Controller: Restored tree has {nodes} nodes, more than the view "
            f"limit of {const.MAX_GUI_NODES}. Generating a smaller tree."
        )
        self._install_generated(dict(self.app_state.get("app_settings", {})))
        return True

    # -------------------------------------------------------------------------
    # RENDERING & PERSISTENCE
    # -------------------------------------------------------------------------

    def refresh(self) -> None:
        """Run one traversal pass and hand the instructions to the views."""
        self.last_instructions = traverse(self.content.root, self.content.cursor)

        if self.tree_view:
            self.tree_view.render(self.last_instructions, on_click=self.set_cursor)
        if self.status_view:
            self.status_view.show_cursor(
                str(self.content.cursor.to_list()), len(self.last_instructions)
            )

    def sync_state(self) -> Dict[str, Any]:
        """Write the current content into the persistent state and return it."""
        self.app_state["content"] = self.content.to_dict()
        return self.app_state

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _install_generated(self, settings: Dict[str, Any]) -> List[str]:
        """Validate settings against the GUI budget and generate the new tree."""
        clean, warnings = validate_settings(settings, max_nodes=const.MAX_GUI_NODES)
        for w in warnings:
            logger.warning(f"Settings: {w}")

        self.app_state["app_settings"] = clean
        root = generate(clean["branching_factor"], clean["depth"])
        cursor = resolve_cursor(root, self.content.cursor)
        self.content = ContentState(root=root, cursor=cursor)
        logger.info(
            f"Controller: Generated tree {clean['branching_factor']}x{clean['depth']} "
            f"({count_nodes(root)} nodes)"
        )

        if self.sidebar_view:
            self.sidebar_view.set_generator_values(clean["branching_factor"], clean["depth"])
        return warnings
