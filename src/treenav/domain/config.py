from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of application settings and the browsed content
(tree and cursor) using JSON. Supports schema migration and default fallback.
"""

import json
import logging
import os
from typing import Any, Dict

from treenav.domain import constants as const
from treenav.domain.migrations import run_migrations
from treenav.domain.state_models import ContentState
from treenav.domain.tree_models import generate
from treenav.domain.validator import get_default_settings, validate_settings
from treenav.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
STATE_FILE = os.path.join(get_user_data_dir(), "state.json")


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    The content block is left empty: the tree is generated on demand from
    the generator settings when the content is decoded.

    Returns:
        Dict[str, Any]: The full JSON structure for state.json.
    """
    return {
        "version": const.CURRENT_CONFIG_VERSION,
        "app_settings": get_default_settings(),
        "content": {},
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Handles legacy schema migration and settings validation automatically.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()

    if not os.path.exists(STATE_FILE):
        logger.debug("State file not found. Returning defaults.")
        return default_state

    try:
        with open(STATE_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load state: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted state file. Resetting to defaults.")
        return default_state

    data = run_migrations(data, get_default_app_state())

    # Merge with defaults to ensure new keys exist
    state = default_state
    if isinstance(data.get("app_settings"), dict):
        state["app_settings"].update(data["app_settings"])
    if isinstance(data.get("content"), dict):
        state["content"] = data["content"]

    settings, warnings = validate_settings(state["app_settings"])
    for w in warnings:
        logger.warning(f"Settings: {w}")
    state["app_settings"] = settings

    state["version"] = const.CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(STATE_FILE), exist_ok=True)
        state["version"] = const.CURRENT_CONFIG_VERSION
        with open(STATE_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False)
        logger.debug(f"State saved to {STATE_FILE}")
    except OSError as e:
        logger.error(f"Failed to save state: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def content_from_state(state: Dict[str, Any]) -> ContentState:
    """
    Decode the content block of an app state dictionary.

    A missing tree is regenerated from the generator settings.
    """
    settings = state.get("app_settings", {})
    branching = settings.get("branching_factor", const.DEFAULT_BRANCHING_FACTOR)
    depth = settings.get("depth", const.DEFAULT_DEPTH)
    return ContentState.from_dict(
        state.get("content"),
        root_factory=lambda: generate(branching, depth),
    )
