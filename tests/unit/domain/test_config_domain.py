from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default state generation.
2. Resilience against corrupted state files.
3. Legacy schema migration (flat v1.0 -> nested v1.1).
4. Persistence (Save/Load) without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from treenav.domain import config as cfg
from treenav.domain.constants import CURRENT_CONFIG_VERSION
from treenav.domain.path_models import EMPTY_PATH, Path
from treenav.domain.state_models import ContentState
from treenav.domain.tree_models import generate, tree_to_data


@pytest.fixture
def state_file(tmp_path):
    """Redirect the state file into a temporary directory."""
    path = tmp_path / "state.json"
    with patch("treenav.domain.config.STATE_FILE", str(path)):
        yield path


def test_load_fresh_state_returns_defaults(state_file):
    assert not state_file.exists()

    state = cfg.load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["content"] == {}
    assert state["app_settings"]["branching_factor"] == 2


def test_load_corrupted_file_returns_defaults(state_file):
    state_file.write_text("{ incomplete json ", encoding="utf-8")

    state = cfg.load_app_state()

    assert state == cfg.get_default_app_state()


def test_load_non_dict_returns_defaults(state_file):
    state_file.write_text("[1, 2, 3]", encoding="utf-8")
    assert cfg.load_app_state() == cfg.get_default_app_state()


def test_save_and_load_round_trip(state_file, make_path):
    content = ContentState(root=generate(3, 2), cursor=make_path(2, 1))
    state = cfg.get_default_app_state()
    state["content"] = content.to_dict()
    cfg.save_app_state(state)

    loaded = cfg.content_from_state(cfg.load_app_state())

    assert loaded.root == generate(3, 2)
    assert loaded.cursor == make_path(2, 1)


def test_missing_new_fields_get_defaults(state_file):
    # A file written before app_settings.log_level existed
    state_file.write_text(json.dumps({
        "version": "1.0.5",
        "app_settings": {"branching_factor": 3, "depth": 2},
        "content": {},
    }), encoding="utf-8")

    state = cfg.load_app_state()

    assert state["app_settings"]["log_level"] == "INFO"
    assert state["version"] == CURRENT_CONFIG_VERSION


def test_missing_root_is_generated_from_settings(state_file):
    state_file.write_text(json.dumps({
        "app_settings": {"branching_factor": 3, "depth": 1},
        "content": {"cursor": [2]},
    }), encoding="utf-8")

    content = cfg.content_from_state(cfg.load_app_state())

    assert content.root == generate(3, 1)
    assert content.cursor == Path.from_steps([2])


def test_migration_from_flat_schema(state_file):
    legacy = {"root": tree_to_data(generate(2, 2)), "cursor": [1, 0]}
    state_file.write_text(json.dumps(legacy), encoding="utf-8")

    state = cfg.load_app_state()

    assert state["content"]["cursor"] == [1, 0]
    assert "root" not in state
    assert cfg.content_from_state(state).cursor == Path.from_steps([1, 0])


def test_migration_renames_generator_settings(state_file):
    state_file.write_text(json.dumps({
        "app_settings": {"branching": 4, "levels": 3},
    }), encoding="utf-8")

    settings = cfg.load_app_state()["app_settings"]

    assert settings["branching_factor"] == 4
    assert settings["depth"] == 3
    assert "branching" not in settings


def test_invalid_settings_are_normalized(state_file):
    state_file.write_text(json.dumps({
        "app_settings": {"depth": "not a number", "appearance_mode": "Neon"},
    }), encoding="utf-8")

    settings = cfg.load_app_state()["app_settings"]

    assert settings["depth"] == 8
    assert settings["appearance_mode"] == "System"


def test_stale_cursor_resets_to_root(state_file):
    state_file.write_text(json.dumps({
        "app_settings": {"branching_factor": 2, "depth": 1},
        "content": {"root": tree_to_data(generate(2, 1)), "cursor": [0, 0, 0]},
    }), encoding="utf-8")

    assert cfg.content_from_state(cfg.load_app_state()).cursor == EMPTY_PATH
