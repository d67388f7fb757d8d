from __future__ import annotations

"""
Tree Traversal and Cursor Matching.

Walks the tree in pre-order and produces one render instruction per
Branch. The cursor is matched while descending by carrying only the part
of it not consumed yet: a child receives the remainder when its index
equals the next cursor step, and None otherwise. Once None, the whole
subtree is known to be cursor-free and no further comparison happens.
"""

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, List, Optional, Tuple

from treenav.domain.path_models import EMPTY_PATH, Path, is_empty, push, reverse
from treenav.domain.tree_models import Branch, Tree, subtree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderInstruction:
    """
    Drawing command for a single Branch.

    The node's address is kept in construction order (leaf-to-root) so a
    traversal pass allocates one Path cell per visited node. The
    root-to-leaf click target is built on first access.

    Attributes:
        label: Text to display.
        is_cursor: True for the node currently selected.
        rev_path: Leaf-to-root Path of the node; shares cells with its parent's.
        depth: Distance from the root (root is 0).
    """
    label: int
    is_cursor: bool
    rev_path: Path
    depth: int

    @cached_property
    def path(self) -> Path:
        """Root-to-leaf Path of the node; the click target."""
        return reverse(self.rev_path)

    @property
    def parent_rev_path(self) -> Path:
        """Leaf-to-root Path of the instruction whose container holds this node."""
        return self.rev_path.tail if self.rev_path.tail is not None else EMPTY_PATH

    @property
    def parent_path(self) -> Path:
        """Root-to-leaf Path of the instruction whose container holds this node."""
        return reverse(self.parent_rev_path)


# Stack entry: (node, unmatched cursor remainder or None, leaf-to-root path, depth)
_Frame = Tuple[Tree, Optional[Path], Path, int]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_instructions(tree: Tree, cursor: Path) -> Iterator[RenderInstruction]:
    """
    Yield render instructions for every Branch, parents before children.

    Args:
        tree: Tree to walk.
        cursor: Root-to-leaf Path of the selected node.

    Yields:
        RenderInstruction: One per Branch, children in index order.
    """
    stack: List[_Frame] = [(tree, cursor, EMPTY_PATH, 0)]

    while stack:
        node, remaining, rev_path, depth = stack.pop()
        if not isinstance(node, Branch):
            continue

        yield RenderInstruction(
            label=node.label,
            is_cursor=remaining is not None and is_empty(remaining),
            rev_path=rev_path,
            depth=depth,
        )

        # Pushed last-to-first so the first child is visited first.
        for step in range(len(node.children) - 1, -1, -1):
            if remaining is not None and not is_empty(remaining) and remaining.head == step:
                next_remaining = remaining.tail
            else:
                next_remaining = None
            stack.append((node.children[step], next_remaining, push(rev_path, step), depth + 1))


def traverse(tree: Tree, cursor: Path) -> List[RenderInstruction]:
    """Collect iter_instructions() into a list."""
    return list(iter_instructions(tree, cursor))


def find_cursor_instruction(
        instructions: List[RenderInstruction]
) -> Optional[RenderInstruction]:
    """Return the instruction marked as cursor, or None if none is rendered."""
    for instruction in instructions:
        if instruction.is_cursor:
            return instruction
    return None


def resolve_cursor(tree: Tree, cursor: Path) -> Path:
    """
    Validate a cursor against a tree.

    Args:
        tree: Tree the cursor should address.
        cursor: Candidate cursor (e.g. restored from disk).

    Returns:
        Path: cursor if it names a node of tree, otherwise the root.
    """
    if subtree(tree, cursor) is None:
        logger.warning(f"Traversal: Cursor {cursor.to_list()} not found. Resetting to root.")
        return EMPTY_PATH
    return cursor
