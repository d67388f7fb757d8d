from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the headless lifecycle: logging bootstrap, resolution of the
tree and cursor (persisted state, generator settings and CLI overrides),
application of the requested moves and rendering of the result.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from treenav.core.navigation.navigator import apply_move
from treenav.core.navigation.renderer import render_lines
from treenav.core.navigation.traversal import RenderInstruction, resolve_cursor, traverse
from treenav.domain import config as cfg
from treenav.domain.state_models import ContentState
from treenav.domain.tree_models import generate
from treenav.domain.validator import validate_settings
from treenav.infra.logging import LoggingConfig, configure_logging, get_logger
from treenav.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success; argparse exits with 2 on bad input).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base state (Default vs Persistent state)
    state = cfg.load_app_state() if args.load_state else cfg.get_default_app_state()

    # 3. Merge and validate setting overrides
    overrides = cli_args.args_to_overrides(args)
    settings, warnings = validate_settings({**state["app_settings"], **overrides})
    state["app_settings"] = settings

    # 4. Logging bootstrap (CLI-specific: Console stderr)
    configure_logging(LoggingConfig(level=settings["log_level"], console=True, log_file=None))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 5. Content resolution
    content = _resolve_content(state, args, reshape="branching_factor" in overrides or "depth" in overrides)

    # 6. Navigation phase
    cursor = content.cursor
    for direction in args.moves:
        cursor = apply_move(content.root, cursor, direction)
        logger.debug(f"Move {direction.value} -> {cursor.to_list()}")
    content = content.with_cursor(cursor)

    # 7. Output rendering phase
    instructions = traverse(content.root, content.cursor)
    if args.json_output:
        print(json.dumps(_to_json_payload(content, instructions), ensure_ascii=False, indent=2))
    else:
        for line in render_lines(instructions):
            print(line)
        print(f"\nCursor: {content.cursor.to_list()}")

    # 8. Optional persistence
    if args.save_state:
        state["content"] = content.to_dict()
        cfg.save_app_state(state)
        logger.info(f"State saved to {cfg.STATE_FILE}")

    return 0

# -----------------------------------------------------------------------------
# CONTENT RESOLUTION
# -----------------------------------------------------------------------------

def _resolve_content(state: Dict[str, Any], args: Any, reshape: bool) -> ContentState:
    """
    Build the starting ContentState.

    Persisted content is used when loading state without shape overrides;
    otherwise a tree is generated from the settings. A persisted or CLI
    cursor that does not address a node falls back to the root.
    """
    settings = state["app_settings"]

    if args.load_state:
        content = cfg.content_from_state(state)
        if reshape:
            root = generate(settings["branching_factor"], settings["depth"])
            content = ContentState(root=root, cursor=resolve_cursor(root, content.cursor))
    else:
        content = ContentState(root=generate(settings["branching_factor"], settings["depth"]))

    if args.cursor is not None:
        content = content.with_cursor(resolve_cursor(content.root, args.cursor))
    return content

# -----------------------------------------------------------------------------
# VIEW RENDERING (JSON)
# -----------------------------------------------------------------------------

def _to_json_payload(content: ContentState, instructions: List[RenderInstruction]) -> Dict[str, Any]:
    """Map the render pass to a JSON-compatible dictionary."""
    return {
        "cursor": content.cursor.to_list(),
        "nodes": [
            {
                "label": ins.label,
                "path": ins.path.to_list(),
                "depth": ins.depth,
                "is_cursor": ins.is_cursor,
            }
            for ins in instructions
        ],
    }

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
