"""Squircle geometry engine: options in, closed vector outlines out."""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from squircle._config import EngineSettings, get_engine_settings
from squircle.cache import FIFOCache

from .corners import CornerBudget, CornerId, CornerRadii, solve_budgets, uniform_budgets
from .params import OptionsLike, ShapeSpec, normalize_options, shape_from_normalized
from .path import DEFAULT_PRECISION, SquirclePath, assemble_path
from .profile import BezierPatch, ProfileCalculator, ProfileKey
from .stroke import inset_shape

KEY_DECIMALS = 4

PathKey = tuple[float, float, float, float, float, float, float, bool]


@dataclass(frozen=True)
class Outline:
    path: SquirclePath
    svg: str
    budgets: Mapping[CornerId, CornerBudget]


@dataclass(frozen=True)
class PathGeometry:
    """Fill outline for a measured frame and, when bordered, its inset."""

    width: float
    height: float
    path: SquirclePath
    svg: str
    stroke_width: float = 0.0
    inset: SquirclePath | None = None
    inset_svg: str | None = None
    inset_offset: float = 0.0
    stroke_clamped: bool = False
    precision: int = DEFAULT_PRECISION
    surface_color: str | None = None
    border_color: str | None = None

    @property
    def has_stroke(self) -> bool:
        return self.stroke_width > 0 and self.inset is not None

    def positioned_inset(self) -> SquirclePath | None:
        if self.inset is None:
            return None
        return self.inset.translate(self.inset_offset, self.inset_offset)


def path_key(shape: ShapeSpec) -> PathKey:
    radii = shape.radii
    return (
        round(shape.width, KEY_DECIMALS),
        round(shape.height, KEY_DECIMALS),
        round(radii.top_left, KEY_DECIMALS),
        round(radii.top_right, KEY_DECIMALS),
        round(radii.bottom_right, KEY_DECIMALS),
        round(radii.bottom_left, KEY_DECIMALS),
        round(shape.smoothing, KEY_DECIMALS),
        bool(shape.preserve_smoothing),
    )


def _measured(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


class SquircleEngine:
    """Owns the path and corner-profile caches; not safe for concurrent use."""

    def __init__(
        self,
        path_cache: FIFOCache[PathKey, Outline] | None = None,
        profile_cache: FIFOCache[ProfileKey, BezierPatch] | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.path_cache: FIFOCache[PathKey, Outline] = (
            path_cache if path_cache is not None else FIFOCache(max_size=self.settings.path_cache_size)
        )
        self.profiles = ProfileCalculator(profile_cache)

    @property
    def profile_cache(self) -> FIFOCache[ProfileKey, BezierPatch]:
        return self.profiles.cache

    def outline(self, shape: ShapeSpec) -> Outline:
        """Return the cached outline for ``shape``, building it on a miss."""

        key = path_key(shape)
        cached = self.path_cache.get(key)
        if cached is not None:
            return cached
        outline = self._build(*key)
        self.path_cache.set(key, outline)
        return outline

    def _build(
        self,
        width: float,
        height: float,
        top_left: float,
        top_right: float,
        bottom_right: float,
        bottom_left: float,
        smoothing: float,
        preserve_smoothing: bool,
    ) -> Outline:
        radii = CornerRadii(top_left, top_right, bottom_right, bottom_left)
        if radii.is_uniform():
            budgets = uniform_budgets(radii.top_left, width, height)
        else:
            budgets = solve_budgets(radii, width, height)
        patches = {
            corner: self.profiles(entry.radius, smoothing, entry.budget, preserve_smoothing)
            for corner, entry in budgets.items()
        }
        path = assemble_path(width, height, patches)
        return Outline(
            path=path,
            svg=path.to_svg(self.settings.precision),
            budgets=MappingProxyType(budgets),
        )

    def compute_shape(self, shape: ShapeSpec) -> PathGeometry:
        outline = self.outline(shape)
        geometry = dict(
            width=shape.width,
            height=shape.height,
            path=outline.path,
            svg=outline.svg,
            precision=self.settings.precision,
            surface_color=shape.surface_color,
            border_color=shape.border_color,
        )
        inset = inset_shape(shape, outline.budgets)
        if inset is None:
            return PathGeometry(**geometry)
        inner = self.outline(inset.shape)
        return PathGeometry(
            **geometry,
            stroke_width=inset.stroke_width,
            inset=inner.path,
            inset_svg=inner.svg,
            inset_offset=inset.offset,
            stroke_clamped=inset.clamped,
        )

    def compute(self, width: object, height: object, options: OptionsLike) -> PathGeometry | None:
        """Geometry for a frame, or None while the frame is unmeasured.

        Raises ``ValidationError`` when the smoothing factor is unusable.
        """

        normalized = normalize_options(options)
        w = _measured(width)
        h = _measured(height)
        if w is None or h is None:
            return None
        return self.compute_shape(shape_from_normalized(w, h, normalized))

    def svg_path(self, width: object, height: object, options: OptionsLike) -> str | None:
        geometry = self.compute(width, height, options)
        return None if geometry is None else geometry.svg

    def clear(self) -> None:
        self.path_cache.clear()
        self.profile_cache.clear()


_default_engine: SquircleEngine | None = None


def default_engine() -> SquircleEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = SquircleEngine(settings=get_engine_settings())
    return _default_engine


def compute_geometry(width: object, height: object, options: OptionsLike) -> PathGeometry | None:
    return default_engine().compute(width, height, options)


def get_svg_path(width: object, height: object, options: OptionsLike) -> str | None:
    return default_engine().svg_path(width, height, options)


__all__ = [
    "Outline",
    "PathGeometry",
    "SquircleEngine",
    "compute_geometry",
    "default_engine",
    "get_svg_path",
    "path_key",
]
