from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from squircle.validation import ValidationError, non_negative, validate_smooth_factor

from .corners import CornerId, CornerRadii


@dataclass(frozen=True)
class RoundedSurfaceOptions:
    """Raw drawing options as supplied by a caller.

    Corner radii fall back to ``base_radius``; colors are passed through as-is.
    """

    smooth_factor: float | None = None
    base_radius: float | None = None
    top_left_radius: float | None = None
    top_right_radius: float | None = None
    bottom_right_radius: float | None = None
    bottom_left_radius: float | None = None
    preserve_smoothing: bool = False
    surface_color: str | None = None
    border_color: str | None = None
    border_width: float | None = None


@dataclass(frozen=True)
class NormalizedOptions:
    radii: CornerRadii
    smoothing: float
    preserve_smoothing: bool
    stroke_width: float
    surface_color: str | None
    border_color: str | None


@dataclass(frozen=True)
class ShapeSpec:
    """Fully defaulted geometry request for one measured frame."""

    width: float
    height: float
    radii: CornerRadii
    smoothing: float
    preserve_smoothing: bool = False
    stroke_width: float = 0.0
    surface_color: str | None = None
    border_color: str | None = None


OptionsLike = Union[RoundedSurfaceOptions, Mapping[str, Any], None]

_CAMEL_ALIASES = {
    "smoothFactor": "smooth_factor",
    "cornerSmoothing": "smooth_factor",
    "baseRadius": "base_radius",
    "cornerRadius": "base_radius",
    "topLeftRadius": "top_left_radius",
    "topRightRadius": "top_right_radius",
    "bottomRightRadius": "bottom_right_radius",
    "bottomLeftRadius": "bottom_left_radius",
    "preserveSmoothing": "preserve_smoothing",
    "surfaceColor": "surface_color",
    "borderColor": "border_color",
    "borderWidth": "border_width",
}
_FIELDS = set(RoundedSurfaceOptions.__dataclass_fields__)
_CORNER_FIELDS = {
    CornerId.TOP_LEFT: "top_left_radius",
    CornerId.TOP_RIGHT: "top_right_radius",
    CornerId.BOTTOM_RIGHT: "bottom_right_radius",
    CornerId.BOTTOM_LEFT: "bottom_left_radius",
}


def coerce_options(options: OptionsLike) -> RoundedSurfaceOptions:
    """Accept an options object or a mapping with snake_case or camelCase keys."""

    if options is None:
        raise ValidationError("options are required; smooth_factor is missing.")
    if isinstance(options, RoundedSurfaceOptions):
        return options
    if not isinstance(options, Mapping):
        raise TypeError("options must be RoundedSurfaceOptions or a mapping.")
    values: dict[str, Any] = {}
    for key, value in options.items():
        name = _CAMEL_ALIASES.get(key, key)
        if name in _FIELDS:
            values[name] = value
    return RoundedSurfaceOptions(**values)


def normalize_options(options: OptionsLike) -> NormalizedOptions:
    opts = coerce_options(options)
    smoothing = validate_smooth_factor(opts.smooth_factor)
    base = non_negative(opts.base_radius)
    radii = {
        corner: non_negative(getattr(opts, field_name), default=base)
        for corner, field_name in _CORNER_FIELDS.items()
    }
    return NormalizedOptions(
        radii=CornerRadii.from_mapping(radii),
        smoothing=smoothing,
        preserve_smoothing=bool(opts.preserve_smoothing),
        stroke_width=non_negative(opts.border_width),
        surface_color=opts.surface_color,
        border_color=opts.border_color,
    )


def shape_from_normalized(width: float, height: float, normalized: NormalizedOptions) -> ShapeSpec:
    return ShapeSpec(
        width=float(width),
        height=float(height),
        radii=normalized.radii,
        smoothing=normalized.smoothing,
        preserve_smoothing=normalized.preserve_smoothing,
        stroke_width=normalized.stroke_width,
        surface_color=normalized.surface_color,
        border_color=normalized.border_color,
    )


def make_shape(width: float, height: float, options: OptionsLike) -> ShapeSpec:
    return shape_from_normalized(width, height, normalize_options(options))


__all__ = [
    "NormalizedOptions",
    "RoundedSurfaceOptions",
    "ShapeSpec",
    "coerce_options",
    "make_shape",
    "normalize_options",
    "shape_from_normalized",
]
