"""Configuration: default paths, constants, and config loading (global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from docgroup.grouping.categories import DEFAULT_CATEGORY
from docgroup.grouping.sort import DEFAULT_SORT

# Directory name inside a documented project for docgroup settings
DOCGROUP_DIR = ".docgroup"
CONFIG_FILENAME = "config.json"


def _global_config_dir() -> Path:
    return Path.home() / ".docgroup"


def global_config_path() -> Path:
    """Path to global config file (~/.docgroup/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration."""
    return {
        "sort": list(DEFAULT_SORT),
        "categories": {
            "enabled": True,
            "default": DEFAULT_CATEGORY,
            "order": [],
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON object from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.docgroup/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.docgroup/config.json)."""
    return project_root / DOCGROUP_DIR / CONFIG_FILENAME


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.docgroup/config.json) + project overrides.

    If project_root is None, only global config (and defaults) are used.
    """
    merged = load_global_config()
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def resolve_path(path: Path) -> Path:
    """Resolve path to absolute, normalized."""
    return path.resolve()


def find_project_root(path: Path) -> Path | None:
    """
    Walk upward from path looking for a directory that contains .docgroup.
    Returns that directory if found, else None.
    """
    resolved = path.resolve()
    if resolved.is_file():
        resolved = resolved.parent
    current: Path | None = resolved
    while current is not None:
        if (current / DOCGROUP_DIR).is_dir():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None
