from __future__ import annotations

"""TreeNav exceptions."""


class TreeNavError(Exception):
    """Base exception for TreeNav errors."""

    pass


class StateDecodeError(TreeNavError):
    """Raised when persisted tree or cursor data cannot be decoded."""

    pass
