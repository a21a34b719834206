from __future__ import annotations

import math
from numbers import Real


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


def validate_smooth_factor(value: object) -> float:
    """Return the smoothing factor as a float in [0, 1].

    Missing, non-numeric and non-finite values are rejected; out of range
    numbers are clamped.
    """

    if value is None:
        raise ValidationError("smooth_factor is required.")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"smooth_factor must be a number, got {type(value).__name__}.")
    factor = float(value)
    if not math.isfinite(factor):
        raise ValidationError("smooth_factor must be finite.")
    return min(max(factor, 0.0), 1.0)


def non_negative(value: object, default: float = 0.0) -> float:
    """Coerce an optional numeric option, clamping negatives and junk to ``default``."""

    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return max(number, 0.0)
