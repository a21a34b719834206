from __future__ import annotations

import importlib.util
from pathlib import Path

from squircle.geometry import PathGeometry


def _load_example(path: Path):
    spec = importlib.util.spec_from_file_location("squircle_example", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_asymmetric_card_example(project_root: Path):
    module = _load_example(project_root / "examples" / "asymmetric_card.py")
    geometry = module.build()
    assert isinstance(geometry, PathGeometry)
    assert geometry.has_stroke
    assert geometry.surface_color == "#f4f1ea"
    x0, y0, x1, y1 = geometry.positioned_inset().bounds()
    assert 0 < x0 and 0 < y0 and x1 < 320 and y1 < 180
