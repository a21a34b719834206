from __future__ import annotations

import numpy as np
import pytest

from squircle.geometry.corners import CornerId
from squircle.geometry.path import (
    ArcTo,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    SquirclePath,
    assemble_path,
    corner_trace,
    format_number,
    format_path,
    rectangle_path,
)
from squircle.geometry.profile import SHARP_PATCH, corner_profile


def _patches(patch):
    return {corner: patch for corner in CornerId}


@pytest.mark.parametrize(
    "value, expected",
    [(200.0, "200"), (1.23456, "1.2346"), (-0.00001, "0"), (0.0, "0"), (-2.5, "-2.5"), (7, "7")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_path_command_letters():
    commands = [
        MoveTo((1, 2)),
        LineTo((3, 4)),
        LineTo((5, 0), relative=True),
        CubicTo((1, 0), (2, 0), (3, 1)),
        ArcTo(10, (2, 2)),
        ClosePath(),
    ]
    assert format_path(commands) == "M 1 2 L 3 4 l 5 0 c 1 0 2 0 3 1 a 10 10 0 0 1 2 2 Z"


def test_all_sharp_corners_make_rectangle():
    path = assemble_path(200, 100, _patches(SHARP_PATCH))
    assert path == rectangle_path(200, 100)
    assert path.to_svg() == "M 0 0 L 200 0 L 200 100 L 0 100 L 0 0 Z"
    assert path.count(CubicTo) == 0
    assert path.count(ArcTo) == 0


def test_rounded_path_structure():
    path = assemble_path(200, 200, _patches(corner_profile(50, 1.0, 100)))
    assert isinstance(path.commands[0], MoveTo)
    assert path.closed
    assert path.count(MoveTo) == 1
    assert path.count(ClosePath) == 1
    assert path.count(CubicTo) == 8
    assert path.count(ArcTo) == 4
    assert sum(1 for cmd in path.commands if isinstance(cmd, LineTo) and not cmd.relative) == 4


def test_path_starts_before_top_right_corner():
    patch = corner_profile(30, 0.6, 50)
    path = assemble_path(120, 100, _patches(patch))
    assert np.allclose(path.commands[0].point, (120 - patch.p, 0))


def test_corner_trace_signs():
    patch = corner_profile(50, 0.0, 100)
    expected = {
        CornerId.TOP_RIGHT: (50, 50),
        CornerId.BOTTOM_RIGHT: (-50, 50),
        CornerId.BOTTOM_LEFT: (-50, -50),
        CornerId.TOP_LEFT: (50, -50),
    }
    for corner, end in expected.items():
        arc = corner_trace(corner, patch)[1]
        assert isinstance(arc, ArcTo)
        assert np.allclose(arc.end, end)
        assert arc.sweep


def test_sharp_corner_trace_is_zero_line():
    trace = corner_trace(CornerId.BOTTOM_LEFT, SHARP_PATCH)
    assert trace == [LineTo((0.0, 0.0), relative=True)]


def test_mixed_corners_close_on_start():
    patches = _patches(corner_profile(20, 0.8, 40))
    patches[CornerId.BOTTOM_LEFT] = SHARP_PATCH
    path = assemble_path(160, 90, patches)
    pts = path.sample()
    assert np.allclose(pts[0], pts[-1])
    assert path.count(ArcTo) == 3


def test_quarter_circle_samples_stay_on_radius():
    patch = corner_profile(50, 0.0, 100)
    path = SquirclePath((MoveTo((150, 0)), *corner_trace(CornerId.TOP_RIGHT, patch)))
    pts = path.sample(arc_samples=9)
    dist = np.linalg.norm(pts - np.array([150.0, 50.0]), axis=1)
    assert np.allclose(dist, 50)


def test_bounds_and_translate():
    path = assemble_path(200, 200, _patches(corner_profile(50, 1.0, 100)))
    assert np.allclose(path.bounds(), (0, 0, 200, 200), atol=1e-9)
    moved = path.translate(3, 4)
    assert np.allclose(moved.bounds(), (3, 4, 203, 204), atol=1e-9)


def test_empty_path_samples():
    assert SquirclePath().sample().shape == (0, 2)
    assert SquirclePath().bounds() == (0.0, 0.0, 0.0, 0.0)
    assert not SquirclePath().closed
