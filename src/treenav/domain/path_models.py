from __future__ import annotations

"""
Path Addressing Models.

Provides the persistent cons-list used to name a node by the sequence of
child indices leading to it. Extending a Path by one step shares every
existing cell with the original value, so the traversal can derive one
child path per visited node without copying the prefix.
"""

from typing import Iterable, Iterator, List, Optional

# -----------------------------------------------------------------------------
# PERSISTENT LIST
# -----------------------------------------------------------------------------

class Path:
    """
    Immutable singly-linked sequence of non-negative child indices.

    A Path is either the empty path (the root) or a cell holding one step
    and a reference to the remaining Path. Cells are never mutated once
    built; any number of Paths may share the same tail.

    Attributes:
        head: Step stored in the first cell (None for the empty path).
        tail: Remaining Path (None for the empty path).
    """

    __slots__ = ("head", "tail", "_length")

    def __init__(self, head: Optional[int] = None, tail: Optional[Path] = None):
        if (head is None) != (tail is None):
            raise ValueError("A Path cell needs both a head and a tail.")
        if head is not None and head < 0:
            raise ValueError(f"Path steps must be non-negative, got {head}.")
        self.head = head
        self.tail = tail
        self._length = 0 if tail is None else tail._length + 1

    @classmethod
    def from_steps(cls, steps: Iterable[int]) -> Path:
        """
        Build a Path whose first cell holds the first element of steps.

        Args:
            steps: Child indices in the order they should be iterated.

        Returns:
            Path: New Path with the same element order as steps.
        """
        result = EMPTY_PATH
        for step in reversed(list(steps)):
            result = Path(int(step), result)
        return result

    def to_list(self) -> List[int]:
        """Return the elements as a plain list, first cell first."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        node = self
        while node.tail is not None:
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        if self is other:
            return True
        if self._length != other._length:
            return False
        a, b = self, other
        while a.tail is not None:
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return True

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Path({self.to_list()})"

    # Cells are shared between Paths, copying must not duplicate them.
    def __copy__(self) -> Path:
        return self

    def __deepcopy__(self, memo: dict) -> Path:
        return self


EMPTY_PATH = Path()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def empty() -> Path:
    """Return the empty Path, naming the root."""
    return EMPTY_PATH


def push(path: Path, step: int) -> Path:
    """
    Prepend one step to path in O(1).

    The argument remains valid and unchanged; the result shares all of its
    cells. During a descent this yields paths in leaf-to-root order.

    Args:
        path: Existing Path.
        step: Child index to add.

    Returns:
        Path: New Path one element longer than path.
    """
    if step < 0:
        raise ValueError(f"Path steps must be non-negative, got {step}.")
    return Path(step, path)


def is_empty(path: Path) -> bool:
    """Return True if path names the root."""
    return path.tail is None


def reverse(path: Path) -> Path:
    """
    Build a new Path holding the elements of path in the opposite order.

    Runs in O(len(path)). The result shares no cells with the argument.

    Args:
        path: Path to reverse.

    Returns:
        Path: Reversed copy.
    """
    result = EMPTY_PATH
    for step in path:
        result = Path(step, result)
    return result

# -----------------------------------------------------------------------------
# ROOT-TO-LEAF HELPERS
# -----------------------------------------------------------------------------

def child(path: Path, step: int) -> Path:
    """
    Append step at the leaf end of a root-to-leaf Path.

    Args:
        path: Root-to-leaf Path of a node.
        step: Index of the child to address.

    Returns:
        Path: Root-to-leaf Path of that child.
    """
    return reverse(push(reverse(path), step))


def parent(path: Path) -> Path:
    """
    Drop the leaf-end step of a root-to-leaf Path.

    The empty Path is its own parent.
    """
    if is_empty(path):
        return path
    return reverse(reverse(path).tail)


def last_step(path: Path) -> Optional[int]:
    """Return the leaf-end step of a root-to-leaf Path, or None at the root."""
    last = None
    for step in path:
        last = step
    return last
