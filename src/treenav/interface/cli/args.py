from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into settings overrides, a starting cursor and a move list.
"""

import argparse
from typing import Any, Dict, List, Optional

from treenav.core.navigation.navigator import Direction
from treenav.domain.path_models import Path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the TreeNav CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treenav",
        description="Browse a generated tree with a cursor and print the rendered view.",
    )

    # --- Tree Shape ---
    p.add_argument(
        "-b", "--branching",
        dest="branching_factor",
        type=int,
        default=None,
        help="Children per branch of the generated tree.",
    )
    p.add_argument(
        "-d", "--depth",
        dest="depth",
        type=int,
        default=None,
        help="Number of branch levels of the generated tree.",
    )

    # --- Cursor ---
    p.add_argument(
        "-c", "--cursor",
        type=parse_cursor,
        default=None,
        help="Starting cursor as comma-separated child indices, e.g. 0,1.",
    )
    p.add_argument(
        "-m", "--moves",
        type=parse_moves,
        default=[],
        help="Comma-separated moves applied in order: left, right, up, down.",
    )

    # --- Persistence ---
    p.add_argument(
        "--load-state",
        action="store_true",
        help="Start from the saved tree and cursor.",
    )
    p.add_argument(
        "--save-state",
        action="store_true",
        help="Save the final tree and cursor.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the cursor and rendered nodes as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into app_settings overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Only the settings given on the command line.
    """
    overrides: Dict[str, Any] = {}
    if args.branching_factor is not None:
        overrides["branching_factor"] = args.branching_factor
    if args.depth is not None:
        overrides["depth"] = args.depth
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides


def parse_cursor(value: str) -> Path:
    """
    argparse type: comma-separated non-negative integers to a Path.

    An empty string names the root.
    """
    steps: List[int] = []
    for token in _split_csv(value) or []:
        try:
            step = int(token)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid cursor step: {token!r}")
        if step < 0:
            raise argparse.ArgumentTypeError(f"cursor steps must be non-negative: {step}")
        steps.append(step)
    return Path.from_steps(steps)


def parse_moves(value: str) -> List[Direction]:
    """argparse type: comma-separated direction names to Directions."""
    moves: List[Direction] = []
    for token in _split_csv(value) or []:
        try:
            moves.append(Direction(token.lower()))
        except ValueError:
            choices = ", ".join(d.value for d in Direction)
            raise argparse.ArgumentTypeError(f"invalid move {token!r} (choose from {choices})")
    return moves

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
