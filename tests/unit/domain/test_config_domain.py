from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

from unittest.mock import patch

import pytest

from compositree.domain.config import (
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)
from compositree.domain.constants import CURRENT_CONFIG_VERSION


@pytest.fixture
def config_path(tmp_path):
    """Redirect the config file into a temporary directory."""
    path = tmp_path / "Compositree" / "config.json"
    with patch("compositree.domain.config.CONFIG_FILE", str(path)):
        yield path


def test_default_config_keys():
    cfg = get_default_config()

    assert cfg["style"] == "indent"
    assert cfg["start_depth"] == 1
    assert cfg["step"] == 2
    assert cfg["indent_marker"] == "-"
    assert cfg["exclude_patterns"]


def test_load_fresh_state_returns_defaults(config_path):
    assert not config_path.exists()

    state = load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"]["style"] == "indent"


def test_load_corrupted_file_returns_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{ incomplete json ", encoding="utf-8")

    assert load_app_state() == get_default_app_state()


def test_load_non_dict_file_returns_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config()["step"] == 2


def test_save_and_load_roundtrip(config_path):
    cfg = get_default_config()
    cfg["style"] = "ascii"
    cfg["step"] = 4

    save_config(cfg)
    loaded = load_config()

    assert config_path.exists()
    assert loaded["style"] == "ascii"
    assert loaded["step"] == 4


def test_partial_session_is_merged_with_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text('{"last_session": {"indent_marker": "*"}}', encoding="utf-8")

    cfg = load_config()

    assert cfg["indent_marker"] == "*"
    assert cfg["start_depth"] == 1
