"""
config_manager.py
-----------------
Reads the tuning files under rect_dodge/config.

- game.json : entity profiles, spawn interval, rule switches
- hud.yaml  : HUD layout and colors

Every file is deep-merged over a caller-supplied default dict, so a partial
file only overrides what it names. Keys called '_notes' are comments and
never reach the caller.
"""

import os
import json
from copy import deepcopy

import yaml

from rect_dodge.core.debug.debug_logger import DebugLogger


CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a tuning file and merge it over defaults.

    Args:
        filename: Name inside config/ ("game", "game.json", "hud.yaml")
                  or an absolute path
        default_dict: Values used for anything the file leaves out
        strict: Raise FileNotFoundError instead of falling back to defaults

    Returns:
        dict: New dict; default_dict is never modified
    """
    default_dict = default_dict or {}
    path = resolve_config_path(filename)

    try:
        data = _read(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        if strict:
            DebugLogger.fail(f"Config unavailable: {path}", category="loading")
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        data = {}

    return _merge_dicts(default_dict, data)


def resolve_config_path(filename):
    """Absolute path for a config name; a missing extension tries .json then .yaml."""
    path = filename if os.path.isabs(filename) else os.path.join(CONFIG_DIR, filename)
    if os.path.splitext(path)[1]:
        return path

    for ext in (".json", ".yaml"):
        if os.path.exists(path + ext):
            return path + ext
    return path + ".json"


# ===========================================================
# File Readers
# ===========================================================

def _read(path):
    ext = os.path.splitext(path)[1].lower()
    loader = _LOADERS.get(ext)
    if loader is None:
        raise ValueError(f"Unsupported config format '{ext}'")

    data = loader(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Top level of {os.path.basename(path)} must be a mapping")

    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


_LOADERS = {
    ".json": _load_json,
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
}


# ===========================================================
# Merge
# ===========================================================

def _merge_dicts(default, override):
    """Deep merge into a new dict. Nested dicts merge; everything else replaces."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else deepcopy(value)
        for key, value in default.items()
        if key != "_notes"
    }

    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict):
            base = merged.get(key)
            merged[key] = _merge_dicts(base if isinstance(base, dict) else {}, value)
        else:
            merged[key] = deepcopy(value)
    return merged
