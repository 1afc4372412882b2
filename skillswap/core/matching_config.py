from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

_MATCHING_CONFIG_CACHE: dict[str, Any] | None = None
_MATCHING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "matching.yaml"


def get_matching_config() -> dict[str, Any]:
    """Load matching config from repo-level config/matching.yaml and cache it."""
    global _MATCHING_CONFIG_CACHE

    if _MATCHING_CONFIG_CACHE is not None:
        return _MATCHING_CONFIG_CACHE

    if not _MATCHING_CONFIG_PATH.exists():
        raise RuntimeError(
            f"Matching config not found at '{_MATCHING_CONFIG_PATH}'. "
            "Expected file: config/matching.yaml"
        )

    try:
        raw = _MATCHING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read matching config '{_MATCHING_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in matching config '{_MATCHING_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid matching config '{_MATCHING_CONFIG_PATH}': expected a top-level mapping."
        )

    _MATCHING_CONFIG_CACHE = parsed
    return _MATCHING_CONFIG_CACHE


def get_matching_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'explore.max_results'."""
    if not path:
        return default

    current: Any = get_matching_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current
