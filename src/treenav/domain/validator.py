from __future__ import annotations

"""
Application Settings Validator.

Normalizes user-editable settings coming from the state file, the CLI or
the GUI. Non-strict mode coerces or replaces bad values and reports each
correction as a warning; strict mode raises instead.
"""

from typing import Any, Dict, List, Tuple

from treenav.domain import constants as const

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_default_settings() -> Dict[str, Any]:
    """Return the default app_settings block."""
    return {
        "appearance_mode": const.DEFAULT_APPEARANCE_MODE,
        "color_theme": const.DEFAULT_COLOR_THEME,
        "branching_factor": const.DEFAULT_BRANCHING_FACTOR,
        "depth": const.DEFAULT_DEPTH,
        "log_level": "INFO",
    }


def validate_settings(
        settings: Dict[str, Any],
        strict: bool = False,
        max_nodes: int = const.MAX_NODES
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize an app_settings dictionary.

    Args:
        settings: Raw settings (may be partial).
        strict: Raise on the first invalid value instead of correcting it.
        max_nodes: Node budget for the generated tree shape (leaves included).

    Returns:
        Tuple[Dict[str, Any], List[str]]: (Normalized settings, warnings).

    Raises:
        TypeError: Strict mode, value of the wrong type.
        ValueError: Strict mode, value out of range.
    """
    warnings: List[str] = []
    defaults = get_default_settings()
    merged = {**defaults, **(settings or {})}

    merged["branching_factor"] = _as_bounded_int(
        merged.get("branching_factor"), defaults["branching_factor"],
        0, const.MAX_BRANCHING_FACTOR, "branching_factor", warnings, strict
    )
    merged["depth"] = _as_bounded_int(
        merged.get("depth"), defaults["depth"],
        0, const.MAX_DEPTH, "depth", warnings, strict
    )
    merged["depth"] = _fit_node_budget(
        merged["branching_factor"], merged["depth"], max_nodes, warnings, strict
    )
    merged["appearance_mode"] = _as_choice(
        merged.get("appearance_mode"), defaults["appearance_mode"],
        const.APPEARANCE_MODES, "appearance_mode", warnings, strict
    )
    merged["log_level"] = _as_choice(
        str(merged.get("log_level") or "").upper(), defaults["log_level"],
        ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), "log_level", warnings, strict
    )
    if not isinstance(merged.get("color_theme"), str) or not merged["color_theme"].strip():
        warnings.append("Invalid field 'color_theme'. Using fallback.")
        merged["color_theme"] = defaults["color_theme"]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bounded_int(
        value: Any,
        fallback: int,
        low: int,
        high: int,
        field: str,
        warnings: List[str],
        strict: bool
) -> int:
    """Coerce a value into an int within [low, high]."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        try:
            value = int(value.strip())
            warnings.append(f"Field '{field}' converted from string to int.")
        except ValueError:
            pass

    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if value < low or value > high:
        msg = f"Field '{field}' out of range [{low}, {high}]: {value}."
        if strict:
            raise ValueError(msg)
        clamped = min(max(value, low), high)
        warnings.append(f"{msg} Clamped to {clamped}.")
        return clamped

    return value


def _as_choice(
        value: Any,
        fallback: str,
        choices: Tuple[str, ...],
        field: str,
        warnings: List[str],
        strict: bool
) -> str:
    """Ensure value is one of the allowed choices."""
    if value in choices:
        return value

    msg = f"Invalid field '{field}': {value!r} not in {list(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _fit_node_budget(
        branching: int,
        depth: int,
        max_nodes: int,
        warnings: List[str],
        strict: bool
) -> int:
    """Lower depth until a uniform tree of that shape stays within max_nodes."""
    fitted = depth
    while fitted > 0 and _uniform_tree_size(branching, fitted, max_nodes) > max_nodes:
        fitted -= 1

    if fitted != depth:
        msg = (
            f"Tree shape {branching}x{depth} exceeds {max_nodes} nodes."
        )
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Depth reduced to {fitted}.")
    return fitted


def _uniform_tree_size(branching: int, depth: int, cap: int) -> int:
    """Number of nodes of generate(branching, depth), leaves included; stops counting past cap."""
    total = 0
    level_width = 1
    for _ in range(depth + 1):
        total += level_width
        if total > cap:
            break
        level_width *= branching
    return total
