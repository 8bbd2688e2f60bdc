"""
test_config_manager.py
----------------------
Unit tests for settings file loading and merging.
"""

import json
import os
from unittest.mock import patch

import pytest

from ijs_logger.core.services.config_manager import load_config, load_settings
from ijs_logger.core.runtime.logger_settings import LoggerSettings


REPO_CONFIG = os.path.join(os.path.dirname(__file__), "..", "..", "config", "logger.yaml")


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def mock_debug_logger():
    with patch("ijs_logger.core.services.config_manager.DebugLogger") as mock_logger:
        yield mock_logger


# ===========================================================
# load_config
# ===========================================================

def test_yaml_merges_over_defaults(tmp_path):
    path = tmp_path / "logger.yaml"
    path.write_text("rich_mode: false\nexclusions:\n  types: [Boss]\n", encoding="utf-8")

    config = load_config(str(path), {"rich_mode": True, "use_logs": True,
                                     "exclusions": {"methods": ["tick"]}})

    assert config == {"rich_mode": False, "use_logs": True,
                      "exclusions": {"methods": ["tick"], "types": ["Boss"]}}


def test_json_is_supported_and_notes_are_ignored(tmp_path):
    path = tmp_path / "logger.json"
    path.write_text(json.dumps({"_notes": "hi", "use_logs": False}), encoding="utf-8")

    assert load_config(str(path), {"use_logs": True}) == {"use_logs": False}


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path), {"use_logs": True}) == {"use_logs": True}


def test_missing_file_falls_back_with_warning(tmp_path, mock_debug_logger):
    config = load_config(str(tmp_path / "missing.yaml"), {"use_logs": True})

    assert config == {"use_logs": True}
    mock_debug_logger.warn.assert_called_once()


def test_invalid_yaml_falls_back(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("use_logs: [unclosed\n", encoding="utf-8")

    assert load_config(str(path), {"use_logs": True}) == {"use_logs": True}


def test_non_mapping_falls_back(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    assert load_config(str(path), {"use_logs": True}) == {"use_logs": True}


def test_strict_mode_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"), strict=True)


# ===========================================================
# load_settings
# ===========================================================

def test_load_settings_without_path_is_default():
    assert load_settings() == LoggerSettings()


def test_load_settings_ignores_unknown_keys(tmp_path):
    path = tmp_path / "logger.yaml"
    path.write_text("rich_mode: false\nfavourite_food: pizza\n", encoding="utf-8")

    settings = load_settings(str(path))

    assert settings.rich_mode is False
    assert settings.use_logs is True


def test_repository_config_loads():
    settings = load_settings(REPO_CONFIG, strict=True)

    assert settings.use_logs is True
    assert settings.highlight_color == "#FF214C"
    assert settings.exclusions["types"] == ["EventManager"]
    assert settings.exclusions["pairs"] == [["SceneManager", "update"]]
