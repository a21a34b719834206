"""Squircle – continuous-curvature rounded rectangle outlines."""

from __future__ import annotations

from .geometry import (
    PathGeometry,
    RoundedSurfaceOptions,
    SquircleEngine,
    compute_geometry,
    get_svg_path,
)
from .validation import ValidationError

__all__ = [
    "PathGeometry",
    "RoundedSurfaceOptions",
    "SquircleEngine",
    "ValidationError",
    "__version__",
    "compute_geometry",
    "get_svg_path",
]

__version__ = "0.1.0"
