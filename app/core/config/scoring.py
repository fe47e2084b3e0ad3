from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from app.core.config import settings

logger = logging.getLogger(__name__)

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None


def _scoring_config_path() -> Path:
    return Path(settings.scoring_config_path)


def get_scoring_config() -> dict[str, Any]:
    """Load scoring config from config/scoring.yaml and cache it.

    A missing file yields an empty mapping so callers fall back to their
    built-in defaults; an unreadable or malformed file is an error.
    """
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    path = _scoring_config_path()
    if not path.exists():
        logger.warning("scoring_config_missing path=%s using_defaults=true", path)
        _SCORING_CONFIG_CACHE = {}
        return _SCORING_CONFIG_CACHE

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'resume_score.skills.cap'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def clear_scoring_config_cache() -> None:
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None
