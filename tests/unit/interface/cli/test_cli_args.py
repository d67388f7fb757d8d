from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to settings overrides.
2. Cursor and move list parsing.
3. Rejection of malformed values (argparse exit code 2).
"""

import pytest

from treenav.core.navigation.navigator import Direction
from treenav.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_defaults_produce_no_overrides():
    args = parse_args([])
    assert args_to_overrides(args) == {}
    assert args.cursor is None
    assert args.moves == []


def test_shape_and_debug_mapping():
    args = parse_args(["-b", "3", "--depth", "4", "--debug"])
    assert args_to_overrides(args) == {
        "branching_factor": 3,
        "depth": 4,
        "log_level": "DEBUG",
    }


def test_cursor_parsing():
    assert parse_args(["--cursor", "0, 1"]).cursor.to_list() == [0, 1]
    assert parse_args(["--cursor", ""]).cursor.to_list() == []


def test_moves_parsing():
    args = parse_args(["--moves", "down,RIGHT, up"])
    assert args.moves == [Direction.DOWN, Direction.RIGHT, Direction.UP]


@pytest.mark.parametrize("argv", [
    ["--cursor", "0,x"],
    ["--cursor", "-1"],
    ["--moves", "down,sideways"],
    ["--depth", "two"],
])
def test_malformed_values_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert exc.value.code == 2
