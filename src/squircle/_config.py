from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_DIR = Path.home() / ".squircle"
CONFIG_FILE = CONFIG_DIR / "squircle.cfg"
DEFAULT_PATH_CACHE_SIZE = 160
DEFAULT_PRECISION = 4
DEFAULT_CONFIG = {
    "_comment": "path_cache_size: finished paths kept in memory. precision: decimals emitted in path data.",
    "path_cache_size": DEFAULT_PATH_CACHE_SIZE,
    "precision": DEFAULT_PRECISION,
}
_MAX_PRECISION = 8


@dataclass(frozen=True)
class EngineSettings:
    """Resolved engine settings from squircle.cfg."""

    path_cache_size: int = DEFAULT_PATH_CACHE_SIZE
    precision: int = DEFAULT_PRECISION


def ensure_user_config() -> None:
    """Ensure ~/.squircle/squircle.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config(path: Path | None = None) -> Dict[str, Any]:
    target = path or CONFIG_FILE
    try:
        loaded = json.loads(target.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def _positive_int(value: Any, default: int, upper: int | None = None) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number <= 0:
        return default
    if upper is not None:
        number = min(number, upper)
    return number


def get_engine_settings(path: Path | None = None) -> EngineSettings:
    """Return the configured cache size and output precision."""

    raw_config = _load_user_config(path)
    return EngineSettings(
        path_cache_size=_positive_int(raw_config.get("path_cache_size"), DEFAULT_PATH_CACHE_SIZE),
        precision=_positive_int(raw_config.get("precision"), DEFAULT_PRECISION, upper=_MAX_PRECISION),
    )
