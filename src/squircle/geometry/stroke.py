from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping

from .corners import CornerBudget, CornerId, CornerRadii
from .params import ShapeSpec


@dataclass(frozen=True)
class StrokeInset:
    """Shrunken shape for a centered border, plus where to place it."""

    shape: ShapeSpec
    stroke_width: float
    offset: float
    clamped: bool = False


def max_stroke_width(budgets: Mapping[CornerId, CornerBudget], width: float, height: float) -> float:
    """Widest stroke whose inset outline cannot fold over itself."""

    positive = [entry.radius for entry in budgets.values() if entry.radius > 0]
    if positive:
        return min(positive)
    return min(width, height) / 2.0


def clamp_stroke(
    stroke_width: float,
    budgets: Mapping[CornerId, CornerBudget],
    width: float,
    height: float,
) -> float:
    if stroke_width <= 0:
        return 0.0
    limit = max_stroke_width(budgets, width, height)
    if stroke_width > limit:
        return max(limit, 0.0)
    return stroke_width


def inset_shape(shape: ShapeSpec, budgets: Mapping[CornerId, CornerBudget]) -> StrokeInset | None:
    """Return the inward-offset shape for ``shape``'s border, or None when unstroked."""

    stroke = clamp_stroke(shape.stroke_width, budgets, shape.width, shape.height)
    if stroke <= 0:
        return None
    half = stroke / 2.0
    radii = CornerRadii.from_mapping(
        {
            corner: max(entry.radius - half, 0.0) if entry.radius > 0 else 0.0
            for corner, entry in budgets.items()
        }
    )
    shrunk = replace(
        shape,
        width=shape.width - stroke,
        height=shape.height - stroke,
        radii=radii,
        stroke_width=0.0,
    )
    if shrunk.width <= 0 or shrunk.height <= 0:
        return None
    return StrokeInset(shape=shrunk, stroke_width=stroke, offset=half, clamped=stroke < shape.stroke_width)


__all__ = ["StrokeInset", "clamp_stroke", "inset_shape", "max_stroke_width"]
