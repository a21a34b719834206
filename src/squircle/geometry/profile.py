from __future__ import annotations

import math
from dataclasses import dataclass

from squircle.cache import FIFOCache

PROFILE_KEY_DECIMALS = 4

ProfileKey = tuple[float, float, bool, float]


@dataclass(frozen=True)
class BezierPatch:
    """Control distances for one cubic-arc-cubic corner.

    ``p`` is the extent the corner consumes along each adjacent edge and
    always equals ``a + b + c + d + arc_chord`` for a rounded corner.
    """

    a: float
    b: float
    c: float
    d: float
    p: float
    arc_chord: float
    radius: float

    @property
    def is_sharp(self) -> bool:
        return self.radius <= 0


SHARP_PATCH = BezierPatch(a=0.0, b=0.0, c=0.0, d=0.0, p=0.0, arc_chord=0.0, radius=0.0)


def _rad(degrees: float) -> float:
    return math.radians(degrees)


def corner_profile(
    radius: float,
    smoothing: float,
    budget: float,
    preserve_smoothing: bool = False,
) -> BezierPatch:
    """Derive the Bezier patch for one corner from its resolved budget."""

    radius = float(radius)
    if radius <= 0:
        return SHARP_PATCH

    p = (1 + smoothing) * radius
    if not preserve_smoothing:
        max_smoothing = budget / radius - 1
        smoothing = min(smoothing, max_smoothing)
        p = min(p, budget)

    arc_measure = 90 * (1 - smoothing)
    arc_chord = math.sin(_rad(arc_measure / 2)) * radius * math.sqrt(2)

    alpha = (90 - arc_measure) / 2
    p3_to_p4 = radius * math.tan(_rad(alpha / 2))

    beta = 45 * smoothing
    c = p3_to_p4 * math.cos(_rad(beta))
    d = c * math.tan(_rad(beta))

    b = (p - arc_chord - c - d) / 3
    a = 2 * b

    if preserve_smoothing and p > budget:
        remaining = budget - d - arc_chord - c
        min_a = remaining / 6
        max_b = remaining - min_a
        b = min(b, max_b)
        a = remaining - b
        p = min(p, budget)

    return BezierPatch(a=a, b=b, c=c, d=d, p=p, arc_chord=arc_chord, radius=radius)


def profile_key(radius: float, smoothing: float, budget: float, preserve_smoothing: bool) -> ProfileKey:
    return (
        round(float(radius), PROFILE_KEY_DECIMALS),
        round(float(smoothing), PROFILE_KEY_DECIMALS),
        bool(preserve_smoothing),
        round(float(budget), PROFILE_KEY_DECIMALS),
    )


class ProfileCalculator:
    """Memoizing front for :func:`corner_profile`."""

    def __init__(self, cache: FIFOCache[ProfileKey, BezierPatch] | None = None) -> None:
        self.cache: FIFOCache[ProfileKey, BezierPatch] = cache if cache is not None else FIFOCache(max_size=None)

    def __call__(
        self,
        radius: float,
        smoothing: float,
        budget: float,
        preserve_smoothing: bool = False,
    ) -> BezierPatch:
        key = profile_key(radius, smoothing, budget, preserve_smoothing)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        # Computed from the rounded inputs so a hit and a miss agree exactly.
        patch = corner_profile(key[0], key[1], key[3], key[2])
        self.cache.set(key, patch)
        return patch


__all__ = ["BezierPatch", "ProfileCalculator", "SHARP_PATCH", "corner_profile", "profile_key"]
