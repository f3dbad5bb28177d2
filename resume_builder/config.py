"""Configuration loading for Resume Builder."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "workspace_dir": ".",
    "store_path": "resume_store.json",
    "report": {"format": "markdown"},
    "logging": {"level": "WARNING"},
}


def load_raw_config(config_path: str = "config/config.local.yaml") -> Dict[str, Any]:
    """Load the configuration dictionary from YAML, over built-in defaults.

    Priority order:
    1. config.local.yaml (user's local overrides)
    2. config.yaml (shipped defaults)
    3. DEFAULT_CONFIG
    """
    target = _resolve(config_path)

    # Default behavior: load config.yaml first, then overlay config.local.yaml.
    if Path(config_path).name == "config.local.yaml":
        base = _load_yaml(_resolve(str(Path(config_path).with_name("config.yaml"))))
        data = _deep_merge(base, _load_yaml(target))
    else:
        data = _load_yaml(target)

    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def _resolve(candidate: str) -> Path:
    path = Path(candidate)
    if path.exists():
        return path
    alt = Path(__file__).resolve().parents[1] / candidate
    if alt.exists():
        return alt
    return path


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(base_value, value)
        else:
            merged[key] = value
    return merged
