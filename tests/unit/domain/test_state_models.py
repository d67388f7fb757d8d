from __future__ import annotations

"""
Unit tests for the persisted content record.

Verifies forward-compatible decoding: missing fields get defaults, bad
fields are discarded, and a cursor that no longer matches the tree is
reset to the root instead of failing.
"""

import pytest

from treenav.domain.path_models import EMPTY_PATH, Path
from treenav.domain.state_models import ContentState, default_root, path_from_data
from treenav.domain.tree_models import generate, tree_to_data
from treenav.exceptions import StateDecodeError


def test_default_state_is_generated_tree_at_root():
    state = ContentState()
    assert state.root == default_root()
    assert state.cursor == EMPTY_PATH


def test_to_dict_from_dict_preserves_content(ragged_tree, make_path):
    state = ContentState(root=ragged_tree, cursor=make_path(2, 0))
    restored = ContentState.from_dict(state.to_dict())

    assert restored.root == ragged_tree
    assert restored.cursor == make_path(2, 0)


def test_cursor_encoded_root_to_leaf(small_tree, make_path):
    data = ContentState(root=small_tree, cursor=make_path(0, 1)).to_dict()
    assert data["cursor"] == [0, 1]


def test_with_cursor_returns_new_record(small_tree, make_path):
    state = ContentState(root=small_tree)
    moved = state.with_cursor(make_path(1))

    assert moved is not state
    assert moved.root is state.root
    assert state.cursor == EMPTY_PATH


@pytest.mark.parametrize("data", [None, {}, "garbage", []])
def test_missing_record_uses_defaults(data):
    state = ContentState.from_dict(data, root_factory=lambda: generate(3, 1))
    assert state.root == generate(3, 1)
    assert state.cursor == EMPTY_PATH


def test_missing_cursor_defaults_to_root(small_tree):
    state = ContentState.from_dict({"root": tree_to_data(small_tree)})
    assert state.root == small_tree
    assert state.cursor == EMPTY_PATH


def test_missing_root_uses_factory():
    state = ContentState.from_dict({"cursor": [0]}, root_factory=lambda: generate(2, 1))
    assert state.root == generate(2, 1)
    assert state.cursor == Path.from_steps([0])


def test_unreadable_tree_falls_back_to_factory(caplog):
    state = ContentState.from_dict(
        {"root": {"Oops": 1}, "cursor": []},
        root_factory=lambda: generate(1, 1),
    )
    assert state.root == generate(1, 1)
    assert "unreadable tree" in caplog.text


def test_stale_cursor_is_reset_to_root(small_tree, caplog):
    state = ContentState.from_dict({"root": tree_to_data(small_tree), "cursor": [5, 0]})
    assert state.cursor == EMPTY_PATH
    assert "Resetting to root" in caplog.text


def test_cursor_past_leaf_is_reset(small_tree):
    state = ContentState.from_dict({"root": tree_to_data(small_tree), "cursor": [0, 0, 0]})
    assert state.cursor == EMPTY_PATH


def test_unknown_fields_are_ignored(small_tree):
    state = ContentState.from_dict({
        "root": tree_to_data(small_tree),
        "cursor": [1],
        "bookmarks": [[0]],
    })
    assert state.cursor == Path.from_steps([1])


@pytest.mark.parametrize("bad", ["0,1", [0, -1], [0, "1"], [True], None])
def test_path_from_data_rejects_bad_values(bad):
    with pytest.raises(StateDecodeError):
        path_from_data(bad)
