from __future__ import annotations

"""
Content State Model.

Defines the persisted record {root, cursor} and its JSON-compatible
encoding. Decoding is forward-compatible: absent or unreadable fields fall
back to defaults instead of failing, and a cursor that no longer addresses
a node of the loaded tree is reset to the root.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from treenav.domain import constants as const
from treenav.domain.path_models import EMPTY_PATH, Path
from treenav.domain.tree_models import Tree, generate, subtree, tree_from_data, tree_to_data
from treenav.exceptions import StateDecodeError

logger = logging.getLogger(__name__)


def default_root() -> Tree:
    """Build the tree used when no persisted tree is available."""
    return generate(const.DEFAULT_BRANCHING_FACTOR, const.DEFAULT_DEPTH)


@dataclass(frozen=True)
class ContentState:
    """
    Snapshot of the browsed tree and the cursor position.

    Instances are replaced, never updated in place: every move produces a
    new ContentState via with_cursor().

    Attributes:
        root: The immutable tree being browsed.
        cursor: Root-to-leaf Path of the selected node.
    """
    root: Tree = field(default_factory=default_root)
    cursor: Path = EMPTY_PATH

    def with_cursor(self, cursor: Path) -> ContentState:
        """Return a copy of this state with the cursor replaced."""
        return ContentState(root=self.root, cursor=cursor)

    def to_dict(self) -> Dict[str, Any]:
        """Encode the state for the JSON state file."""
        return {
            "root": tree_to_data(self.root),
            "cursor": self.cursor.to_list(),
        }

    @classmethod
    def from_dict(
            cls,
            data: Optional[Dict[str, Any]],
            root_factory: Callable[[], Tree] = default_root,
    ) -> ContentState:
        """
        Decode a state record, substituting defaults for missing fields.

        Args:
            data: Decoded JSON object (may be None or partial).
            root_factory: Builds the tree when none can be decoded.

        Returns:
            ContentState: Always a consistent state whose cursor is valid.
        """
        data = data if isinstance(data, dict) else {}

        root: Optional[Tree] = None
        if "root" in data:
            try:
                root = tree_from_data(data["root"])
            except StateDecodeError as e:
                logger.warning(f"State: Discarding unreadable tree ({e}). Using default tree.")
        if root is None:
            root = root_factory()

        cursor = EMPTY_PATH
        if "cursor" in data:
            try:
                cursor = path_from_data(data["cursor"])
            except StateDecodeError as e:
                logger.warning(f"State: Discarding unreadable cursor ({e}).")

        if subtree(root, cursor) is None:
            logger.warning(
                f"State: Cursor {cursor.to_list()} does not match the loaded tree. "
                f"Resetting to root."
            )
            cursor = EMPTY_PATH

        return cls(root=root, cursor=cursor)


def path_from_data(data: Any) -> Path:
    """
    Decode a root-to-leaf cursor stored as a list of integers.

    Raises:
        StateDecodeError: If data is not a list of non-negative integers.
    """
    if not isinstance(data, list):
        raise StateDecodeError(f"Cursor must be a list, got {data!r}")

    steps: List[int] = []
    for step in data:
        if isinstance(step, bool) or not isinstance(step, int) or step < 0:
            raise StateDecodeError(f"Invalid cursor step: {step!r}")
        steps.append(step)
    return Path.from_steps(steps)
