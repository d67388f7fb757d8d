from __future__ import annotations

"""
Tree Structure Data Models.

Provides the immutable n-ary tree browsed by the cursor, the synthetic
generator used for demo and test trees, path-based subtree lookup, and
the tagged JSON encoding used by the state file.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from treenav.domain.path_models import Path
from treenav.exceptions import StateDecodeError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """Terminal node without children."""

    def __repr__(self) -> str:
        return "Leaf"


@dataclass(frozen=True)
class Branch:
    """
    Internal node of the tree.

    Attributes:
        label: Display value. Not required to be unique.
        children: Ordered child subtrees.
    """
    label: int
    children: Tuple[Tree, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


Tree = Union[Leaf, Branch]

LEAF = Leaf()

# JSON tag for the Leaf variant; branches are encoded as {"Branch": [label, [...]]}
_LEAF_TAG = "Leaf"
_BRANCH_TAG = "Branch"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate(branching_factor: int, depth: int) -> Tree:
    """
    Build a synthetic tree of uniform shape.

    Each level is built once and shared by all of its parent's children,
    so memory grows with depth rather than with the number of nodes.

    Args:
        branching_factor: Number of children of every Branch.
        depth: Number of Branch levels above the leaves.

    Returns:
        Tree: LEAF when depth is 0, otherwise Branch(depth, ...).
    """
    if branching_factor < 0 or depth < 0:
        raise ValueError(
            f"Generator arguments must be non-negative "
            f"(branching_factor={branching_factor}, depth={depth})."
        )

    tree: Tree = LEAF
    for level in range(1, depth + 1):
        tree = Branch(level, (tree,) * branching_factor)
    return tree


def subtree(tree: Tree, path: Path) -> Optional[Tree]:
    """
    Follow a root-to-leaf Path from tree.

    Args:
        tree: Root of the lookup.
        path: Child indices, first step first.

    Returns:
        Optional[Tree]: Node reached when the path is exhausted, or None
        when the path indexes past a Leaf or outside the children.
    """
    node = tree
    for step in path:
        if not isinstance(node, Branch) or not 0 <= step < len(node.children):
            return None
        node = node.children[step]
    return node


def count_nodes(tree: Tree) -> int:
    """Count every node, leaves included, without recursion."""
    total = 0
    stack: List[Tree] = [tree]
    while stack:
        node = stack.pop()
        total += 1
        if isinstance(node, Branch):
            stack.extend(node.children)
    return total

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

def tree_to_data(tree: Tree) -> Any:
    """
    Encode a tree into JSON-compatible data.

    Args:
        tree: Tree to encode.

    Returns:
        Any: "Leaf" or {"Branch": [label, [child, ...]]}.
    """
    encoded: dict = {}
    stack: List[Tuple[Tree, bool]] = [(tree, False)]

    # Post-order: children are encoded before their parent is assembled.
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Leaf):
            encoded[id(node)] = _LEAF_TAG
            continue
        if id(node) in encoded:
            continue
        if expanded:
            encoded[id(node)] = {
                _BRANCH_TAG: [node.label, [encoded[id(c)] for c in node.children]]
            }
            continue
        stack.append((node, True))
        for c in node.children:
            stack.append((c, False))

    return encoded[id(tree)]


def tree_from_data(data: Any) -> Tree:
    """
    Decode the output of tree_to_data.

    Args:
        data: Decoded JSON value.

    Returns:
        Tree: Reconstructed tree.

    Raises:
        StateDecodeError: If data does not follow the tagged encoding.
    """
    results: List[Tree] = []
    stack: List[Tuple[Any, bool]] = [(data, False)]

    while stack:
        item, expanded = stack.pop()
        if item == _LEAF_TAG:
            results.append(LEAF)
            continue

        label, children = _unpack_branch(item)
        if expanded:
            count = len(children)
            built = results[len(results) - count:] if count else []
            del results[len(results) - count:]
            results.append(Branch(label, tuple(built)))
            continue

        stack.append((item, True))
        # Reversed push keeps the decoded children in source order.
        for c in reversed(children):
            stack.append((c, False))

    return results[0]


def _unpack_branch(item: Any) -> Tuple[int, list]:
    """Validate a {"Branch": [label, children]} value and return its parts."""
    if not isinstance(item, dict) or list(item.keys()) != [_BRANCH_TAG]:
        raise StateDecodeError(f"Unrecognized tree node: {item!r}")

    payload = item[_BRANCH_TAG]
    if not isinstance(payload, list) or len(payload) != 2:
        raise StateDecodeError(f"Malformed branch payload: {payload!r}")

    label, children = payload
    if isinstance(label, bool) or not isinstance(label, int):
        raise StateDecodeError(f"Branch label must be an integer, got {label!r}")
    if not isinstance(children, list):
        raise StateDecodeError(f"Branch children must be a list, got {children!r}")
    return label, children
