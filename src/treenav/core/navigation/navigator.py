from __future__ import annotations

"""
Cursor Navigator.

Computes the next cursor Path for a directional command. Every move is a
pure function of the tree shape and the current cursor: a move whose
target does not exist returns the cursor unchanged instead of failing.
"""

import logging
from enum import Enum
from typing import Callable, Dict

from treenav.domain.path_models import Path, child, is_empty, last_step, parent
from treenav.domain.tree_models import Branch, Tree, subtree

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Directional commands accepted by apply_move()."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

# -----------------------------------------------------------------------------
# DIRECTIONAL MOVES
# -----------------------------------------------------------------------------

def move_down(tree: Tree, cursor: Path) -> Path:
    """Descend to the first child of the cursor node, if it has one."""
    node = subtree(tree, cursor)
    if isinstance(node, Branch) and node.children:
        return child(cursor, 0)
    logger.debug(f"Navigator: {cursor.to_list()} has no children.")
    return cursor


def move_up(tree: Tree, cursor: Path) -> Path:
    """Ascend to the parent of the cursor node; the root stays put."""
    if is_empty(cursor):
        logger.debug("Navigator: Already at root.")
        return cursor
    return parent(cursor)


def move_right(tree: Tree, cursor: Path) -> Path:
    """Select the next sibling. No wrap-around past the last child."""
    return _move_sibling(tree, cursor, +1)


def move_left(tree: Tree, cursor: Path) -> Path:
    """Select the previous sibling. No wrap-around before the first child."""
    return _move_sibling(tree, cursor, -1)


_MOVES: Dict[Direction, Callable[[Tree, Path], Path]] = {
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
    Direction.UP: move_up,
    Direction.DOWN: move_down,
}


def apply_move(tree: Tree, cursor: Path, direction: Direction) -> Path:
    """
    Dispatch a directional command to the matching move.

    Args:
        tree: Browsed tree.
        cursor: Current root-to-leaf cursor.
        direction: A Direction or its string value.

    Returns:
        Path: The new cursor.

    Raises:
        ValueError: If direction is not a known direction name.
    """
    return _MOVES[Direction(direction)](tree, cursor)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _move_sibling(tree: Tree, cursor: Path, offset: int) -> Path:
    """Shift the last step of cursor by offset when that sibling exists."""
    if is_empty(cursor):
        logger.debug("Navigator: Root has no siblings.")
        return cursor

    parent_path = parent(cursor)
    target = last_step(cursor) + offset
    siblings = subtree(tree, parent_path)

    if target < 0 or not isinstance(siblings, Branch) or target >= len(siblings.children):
        logger.debug(f"Navigator: No sibling at index {target} under {parent_path.to_list()}.")
        return cursor
    return child(parent_path, target)
