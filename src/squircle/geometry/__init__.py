"""Geometry engine: budgets, corner profiles, path assembly and stroke insets."""

from __future__ import annotations

from .corners import CornerBudget, CornerId, CornerRadii, solve_budgets, uniform_budgets
from .engine import PathGeometry, SquircleEngine, compute_geometry, get_svg_path
from .params import RoundedSurfaceOptions, ShapeSpec, make_shape, normalize_options
from .path import SquirclePath, assemble_path, format_path
from .profile import BezierPatch, ProfileCalculator, corner_profile
from .stroke import inset_shape
from .svg import render_svg_document

__all__ = [
    "BezierPatch",
    "CornerBudget",
    "CornerId",
    "CornerRadii",
    "PathGeometry",
    "ProfileCalculator",
    "RoundedSurfaceOptions",
    "ShapeSpec",
    "SquircleEngine",
    "SquirclePath",
    "assemble_path",
    "compute_geometry",
    "corner_profile",
    "format_path",
    "get_svg_path",
    "inset_shape",
    "make_shape",
    "normalize_options",
    "render_svg_document",
    "solve_budgets",
    "uniform_budgets",
]
