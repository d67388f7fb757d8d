from __future__ import annotations

"""
Text Renderer.

Converts a render instruction stream into a directory-listing style text
view (├──, └──). Used by the CLI and for diagnostics.
"""

from typing import List

from treenav.core.navigation.traversal import RenderInstruction

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_lines(instructions: List[RenderInstruction]) -> List[str]:
    """
    Render instructions as text lines, one per node.

    The cursor node is shown as [label]. The first instruction is the root
    and carries no connector.

    Args:
        instructions: Pre-order stream produced by the traversal.

    Returns:
        List[str]: Visual lines.
    """
    lines: List[str] = []
    # Continuation prefix for each open depth ("│   " or "    ")
    prefixes: List[str] = []

    for i, ins in enumerate(instructions):
        text = f"[{ins.label}]" if ins.is_cursor else str(ins.label)

        if ins.depth == 0:
            lines.append(text)
            prefixes = []
            continue

        is_last = not _has_later_sibling(instructions, i)
        connector = "└── " if is_last else "├── "

        del prefixes[ins.depth - 1:]
        lines.append("".join(prefixes) + connector + text)
        prefixes.append("    " if is_last else "│   ")

    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _has_later_sibling(instructions: List[RenderInstruction], index: int) -> bool:
    """Check whether another node with the same parent follows index."""
    depth = instructions[index].depth
    for ins in instructions[index + 1:]:
        if ins.depth < depth:
            return False
        if ins.depth == depth:
            return True
    return False
