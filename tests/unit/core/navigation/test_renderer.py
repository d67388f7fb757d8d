from __future__ import annotations

"""
Unit tests for the text renderer.
"""

from treenav.core.navigation.renderer import render_lines
from treenav.core.navigation.traversal import traverse
from treenav.domain.path_models import EMPTY_PATH


def test_render_small_tree_with_root_cursor(small_tree):
    lines = render_lines(traverse(small_tree, EMPTY_PATH))
    assert lines == [
        "[2]",
        "├── 1",
        "└── 1",
    ]


def test_render_marks_nested_cursor(ragged_tree, make_path):
    lines = render_lines(traverse(ragged_tree, make_path(2, 0)))
    assert lines == [
        "10",
        "├── 20",
        "│   └── 21",
        "└── 30",
        "    └── [31]",
    ]


def test_render_empty_stream():
    assert render_lines([]) == []
