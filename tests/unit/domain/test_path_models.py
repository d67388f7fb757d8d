from __future__ import annotations

"""
Unit tests for the Path addressing model.

Verifies:
1. O(1) push with structural sharing (original value stays usable).
2. Structural equality regardless of how a Path was built.
3. Reversal and root-to-leaf helpers.
"""

import copy

import pytest

from treenav.domain.path_models import (
    EMPTY_PATH,
    Path,
    child,
    empty,
    is_empty,
    last_step,
    parent,
    push,
    reverse,
)


def test_empty_path_names_root():
    assert is_empty(empty())
    assert empty() is EMPTY_PATH
    assert len(EMPTY_PATH) == 0
    assert EMPTY_PATH.to_list() == []
    assert not EMPTY_PATH


def test_push_prepends_and_shares_tail():
    base = push(push(EMPTY_PATH, 1), 0)
    extended = push(base, 5)

    assert extended.to_list() == [5, 0, 1]
    assert extended.tail is base
    # The argument is untouched
    assert base.to_list() == [0, 1]
    assert len(base) == 2 and len(extended) == 3


def test_sibling_paths_share_the_same_prefix():
    prefix = Path.from_steps([3, 4])
    left = push(prefix, 0)
    right = push(prefix, 1)

    assert left.tail is right.tail is prefix
    assert left != right
def test_push_rejects_negative_steps():
    with pytest.raises(ValueError):
        push(EMPTY_PATH, -1)


def test_negative_steps_rejected_when_building_paths():
    with pytest.raises(ValueError):
        Path.from_steps([0, -1])
    with pytest.raises(ValueError):
        Path(-2, EMPTY_PATH)
    with pytest.raises(ValueError):
        push(EMPTY_PATH, -1)


def test_equality_is_structural():
    built_by_push = push(push(EMPTY_PATH, 2), 1)
    built_from_steps = Path.from_steps([1, 2])

    assert built_by_push == built_from_steps
    assert hash(built_by_push) == hash(built_from_steps)
    assert Path.from_steps([1]) != Path.from_steps([1, 0])
    assert Path.from_steps([1, 3]) != Path.from_steps([1, 2])
    assert Path.from_steps([0]) != [0]


def test_reverse_is_its_own_inverse():
    p = Path.from_steps([4, 0, 7, 1])
    r = reverse(p)

    assert r.to_list() == [1, 7, 0, 4]
    assert reverse(r) == p
    assert reverse(EMPTY_PATH) == EMPTY_PATH


def test_reverse_produces_independent_cells():
    p = Path.from_steps([1, 2, 3])
    r = reverse(reverse(p))

    node_a, node_b = p, r
    while node_a.tail is not None:
        assert node_a is not node_b
        node_a, node_b = node_a.tail, node_b.tail


def test_child_and_parent_work_at_leaf_end():
    p = Path.from_steps([1, 0])

    assert child(p, 3).to_list() == [1, 0, 3]
    assert parent(p).to_list() == [1]
    assert parent(EMPTY_PATH) is EMPTY_PATH
    assert p.to_list() == [1, 0]


def test_last_step():
    assert last_step(Path.from_steps([2, 5])) == 5
    assert last_step(EMPTY_PATH) is None


def test_paths_usable_as_dict_keys():
    index = {Path.from_steps([0, 1]): "a"}
    assert index[push(push(EMPTY_PATH, 1), 0)] == "a"


def test_copy_returns_same_immutable_value():
    p = Path.from_steps([1, 2])
    assert copy.copy(p) is p
    assert copy.deepcopy(p) is p


def test_half_built_cell_is_rejected():
    with pytest.raises(ValueError):
        Path(1, None)
