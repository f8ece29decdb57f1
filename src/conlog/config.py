"""Configuration management for conlog.

Three-layer config resolution (highest priority wins):
  1. Explicit overrides — keyword arguments from the host application
  2. Project config — .conlog.json in the working directory or a parent
  3. Global config — ~/.conlog/config.json

Recognised keys:
  enable_logging  — false turns every log_* call into a no-op
  log_level       — initial threshold ("Development", "Info", ... or an int)
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from conlog.lib.log_lib.levels import DEFAULT_LEVEL, parse_level


PROJECT_CONFIG_NAME = ".conlog.json"

DEFAULTS = {
    "enable_logging": True,
    "log_level": "Info",
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.conlog/)."""
    return Path.home() / ".conlog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .conlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .conlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(start_dir=None, keys=None, **overrides):
    """Resolve config values using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. Keyword overrides (None means "not given")
      2. Project .conlog.json
      3. Global ~/.conlog/config.json
    and falls back to DEFAULTS.

    Returns a dict with resolved values.
    """
    if keys is None:
        keys = list(DEFAULTS)

    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config()

    resolved = {}
    for key in keys:
        # JSON may use either dashes or underscores
        alt_key = key.replace("_", "-")

        for layer in (overrides, project_cfg, global_cfg):
            value = layer.get(key)
            if value is None:
                value = layer.get(alt_key)
            if value is not None:
                resolved[key] = value
                break
        else:
            resolved[key] = DEFAULTS.get(key)

    return resolved


@dataclass
class LogSettings:
    """Parsed logging settings.

    problems holds one message per setting that was invalid and
    replaced by its default (only filled when loading non-strictly).
    """
    enable_logging: bool = True
    log_level: int = DEFAULT_LEVEL
    problems: List[str] = field(default_factory=list)


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() not in ("0", "false", "no", "off", "")
    return bool(value)


def load_settings(start_dir=None, strict=True, **overrides):
    """Resolve and parse the logging settings.

    Args:
        start_dir: Where to start looking for .conlog.json
        strict: Raise on an invalid log_level instead of falling back
            to the default and recording the problem
        **overrides: Explicit values, highest priority

    Raises:
        ValueError: if strict and log_level names an unknown level.
    """
    cfg = resolve_config(start_dir, **overrides)
    settings = LogSettings(enable_logging=_as_bool(cfg["enable_logging"]))
    try:
        settings.log_level = parse_level(cfg["log_level"])
    except ValueError as e:
        if strict:
            raise
        settings.problems.append(
            f"{e}; using {DEFAULTS['log_level']} instead")
    return settings
