from __future__ import annotations

import math

import pytest

from squircle.geometry.corners import CornerId
from squircle.geometry.params import RoundedSurfaceOptions, coerce_options, make_shape, normalize_options
from squircle.validation import ValidationError


def test_corner_radii_default_to_base():
    normalized = normalize_options(RoundedSurfaceOptions(smooth_factor=0.6, base_radius=12, top_left_radius=30))
    radii = normalized.radii
    assert radii[CornerId.TOP_LEFT] == 30
    assert radii.top_right == radii.bottom_right == radii.bottom_left == 12


def test_radii_default_to_zero_without_base():
    normalized = normalize_options({"smooth_factor": 0.5})
    assert normalized.radii.as_dict() == {corner: 0.0 for corner in CornerId}
    assert normalized.stroke_width == 0.0
    assert normalized.preserve_smoothing is False


def test_negative_values_clamp_to_zero():
    normalized = normalize_options(
        RoundedSurfaceOptions(smooth_factor=0.5, base_radius=10, bottom_left_radius=-4, border_width=-2)
    )
    assert normalized.radii.bottom_left == 0.0
    assert normalized.radii.top_left == 10.0
    assert normalized.stroke_width == 0.0


def test_smoothing_clamped_into_unit_range():
    assert normalize_options({"smooth_factor": 1.7}).smoothing == 1.0
    assert normalize_options({"smooth_factor": -0.3}).smoothing == 0.0


@pytest.mark.parametrize("value", [None, "0.6", True, math.nan, math.inf, object()])
def test_invalid_smoothing_rejected(value):
    with pytest.raises(ValidationError):
        normalize_options({"smooth_factor": value, "base_radius": 10})


def test_missing_smoothing_rejected():
    with pytest.raises(ValidationError):
        normalize_options(RoundedSurfaceOptions(base_radius=10))


def test_camel_case_mapping():
    opts = coerce_options(
        {
            "smoothFactor": 0.8,
            "baseRadius": 16,
            "topRightRadius": 4,
            "borderWidth": 2,
            "surfaceColor": "#fafafa",
            "borderColor": "tomato",
            "unrelated": "ignored",
        }
    )
    assert opts.smooth_factor == 0.8
    assert opts.top_right_radius == 4
    assert opts.surface_color == "#fafafa"


def test_make_shape_passes_colors_through():
    shape = make_shape(120, 80, {"smooth_factor": 0.4, "surface_color": "red", "border_color": "blue"})
    assert (shape.width, shape.height) == (120.0, 80.0)
    assert shape.surface_color == "red"
    assert shape.border_color == "blue"


def test_options_type_checked():
    with pytest.raises(TypeError):
        coerce_options([("smooth_factor", 0.5)])
