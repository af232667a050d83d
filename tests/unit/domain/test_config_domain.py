from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json

from webstager.domain.config import (
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_app_state,
    save_config,
)
from webstager.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_values() -> None:
    conf = get_default_config()
    assert conf["id_strategy"] == "random"
    assert conf["confirm_delete"] is True
    assert get_default_app_state()["last_session"] == conf


def test_load_fresh_state_returns_defaults(tmp_path) -> None:
    state = load_app_state(str(tmp_path / "config.json"))
    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"]["log_level"] == "INFO"


def test_load_corrupted_file_returns_defaults(tmp_path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{ incomplete json ", encoding="utf-8")

    state = load_app_state(str(config_path))
    assert state == get_default_app_state()


def test_load_non_dict_returns_defaults(tmp_path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(str(config_path)) == get_default_config()


def test_partial_file_is_merged_over_defaults(tmp_path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"version": "0.1.0", "last_session": {"id_strategy": "counter"}}),
        encoding="utf-8",
    )

    state = load_app_state(str(config_path))
    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"]["id_strategy"] == "counter"
    assert state["last_session"]["confirm_delete"] is True


def test_save_and_reload_roundtrip(tmp_path) -> None:
    config_path = str(tmp_path / "nested" / "config.json")
    conf = get_default_config()
    conf["appearance_mode"] = "Dark"

    assert save_config(conf, config_path) is True
    assert load_config(config_path)["appearance_mode"] == "Dark"


def test_save_does_not_mutate_input(tmp_path) -> None:
    state = {"version": "old", "last_session": get_default_config()}
    save_app_state(state, str(tmp_path / "config.json"))
    assert state["version"] == "old"


def test_save_failure_returns_false(tmp_path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    # Parent "directory" is a regular file, so the write must fail
    assert save_app_state(get_default_app_state(), str(blocker / "config.json")) is False
