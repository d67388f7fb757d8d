from __future__ import annotations

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

def run_migrations(data: Dict[str, Any], default_state: Dict[str, Any]) -> Dict[str, Any]:
    """
    Orchestrate the migration of legacy state schemas to the current version.

    Args:
        data: The raw dictionary loaded from state.json.
        default_state: A clean instance of the current version's default state.

    Returns:
        Dict[str, Any]: The migrated state dictionary.
    """
    # 1. Migration: Flat Schema (v1.0) -> Hierarchical Schema (v1.1)
    # Detection: 'root' or 'cursor' exists at root level
    if "root" in data or "cursor" in data:
        logger.info("Migrations: Detected legacy v1.0 schema. Upgrading to v1.1...")
        new_state = default_state.copy()
        new_state["content"] = {k: data[k] for k in ("root", "cursor") if k in data}
        if isinstance(data.get("app_settings"), dict):
            new_state["app_settings"] = {**default_state["app_settings"], **data["app_settings"]}
        data = new_state

    # 2. Migration: Generator keys renamed (v1.1)
    _migrate_generator_settings(data)

    return data

def _migrate_generator_settings(data: Dict[str, Any]) -> None:
    """
    Rename legacy 'branching'/'levels' settings to 'branching_factor'/'depth'.

    Args:
        data: The state dictionary to migrate in-place.
    """
    settings = data.get("app_settings")
    if not isinstance(settings, dict):
        return

    for old_key, new_key in (("branching", "branching_factor"), ("levels", "depth")):
        if old_key in settings and new_key not in settings:
            settings[new_key] = settings.pop(old_key)
            logger.info(f"Migrations: app_settings {old_key} -> {new_key}")
