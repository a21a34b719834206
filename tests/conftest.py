from __future__ import annotations

from pathlib import Path

import pytest

from squircle import _config
from squircle.geometry import SquircleEngine

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def engine() -> SquircleEngine:
    return SquircleEngine()


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a scratch directory."""
    config_dir = tmp_path / ".squircle"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "squircle.cfg")
    return config_dir
