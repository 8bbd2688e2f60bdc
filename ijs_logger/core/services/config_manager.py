"""
config_manager.py
-----------------
Configuration loader for logger settings files.

Features:
- Supports .yaml/.yml and .json config files
- Recursively merges defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

import yaml

from ijs_logger.core.debug.debug_logger import DebugLogger
from ijs_logger.core.runtime.logger_settings import LoggerSettings


# ===========================================================
# Public API
# ===========================================================

def load_config(path, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        path: Path to a .yaml, .yml or .json file
        default_dict: Default fallback config
        strict: If True, raise exception on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    try:
        if path.endswith((".yaml", ".yml")):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        if not isinstance(data, dict):
            raise ValueError(f"top level of {os.path.basename(path)} is not a mapping")

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {path}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return default_dict.copy()


def load_settings(path=None, strict=False):
    """
    Load LoggerSettings from a file, merged over the built-in defaults.

    Args:
        path: Settings file, or None for pure defaults
        strict: Propagate load failures instead of falling back

    Returns:
        LoggerSettings
    """
    defaults = LoggerSettings().to_dict()
    if path is None:
        return LoggerSettings.from_dict(defaults)
    return LoggerSettings.from_dict(load_config(path, defaults, strict=strict))


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file. An empty file loads as an empty mapping."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
