from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Mapping

import numpy as np

from .corners import CornerId
from .profile import BezierPatch

Point = tuple[float, float]

DEFAULT_PRECISION = 4


def _pt(value: Iterable[float]) -> Point:
    x, y = (float(v) for v in value)
    return (x, y)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point
    relative: bool = False


@dataclass(frozen=True)
class CubicTo:
    """Relative cubic Bezier: both control points and the end are offsets."""

    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class ArcTo:
    """Relative circular arc; large-arc is always off for corner traces."""

    radius: float
    end: Point
    sweep: bool = True


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = MoveTo | LineTo | CubicTo | ArcTo | ClosePath


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _format_command(command: PathCommand, precision: int) -> str:
    def fmt(*values: float) -> str:
        return " ".join(format_number(v, precision) for v in values)

    if isinstance(command, MoveTo):
        return f"M {fmt(*command.point)}"
    if isinstance(command, LineTo):
        return f"{'l' if command.relative else 'L'} {fmt(*command.point)}"
    if isinstance(command, CubicTo):
        return f"c {fmt(*command.control1, *command.control2, *command.end)}"
    if isinstance(command, ArcTo):
        sweep = 1 if command.sweep else 0
        return f"a {fmt(command.radius, command.radius)} 0 0 {sweep} {fmt(*command.end)}"
    if isinstance(command, ClosePath):
        return "Z"
    raise TypeError(f"Unsupported path command {command!r}.")


def format_path(commands: Iterable[PathCommand], precision: int = DEFAULT_PRECISION) -> str:
    """Serialize commands to the SVG ``M L C A Z`` subset at fixed precision."""

    return " ".join(_format_command(command, precision) for command in commands)


def _sample_cubic(start: np.ndarray, c1: np.ndarray, c2: np.ndarray, end: np.ndarray, samples: int) -> np.ndarray:
    t = np.linspace(0.0, 1.0, max(int(samples), 2), endpoint=True).reshape(-1, 1)
    a = (1 - t) ** 3
    b = 3 * (1 - t) ** 2 * t
    c = 3 * (1 - t) * t**2
    d = t**3
    return a * start + b * c1 + c * c2 + d * end


def _sample_arc(start: np.ndarray, end: np.ndarray, radius: float, sweep: bool, samples: int) -> np.ndarray:
    """Sample a small-arc, unrotated SVG arc from its endpoints."""
    half = (start - end) / 2.0
    chord_sq = float(half @ half)
    if chord_sq < 1e-18 or radius <= 0:
        return np.vstack([start, end])
    r = max(radius, math.sqrt(chord_sq))
    scale = math.sqrt(max(0.0, (r * r - chord_sq) / chord_sq))
    # Small arc with large-arc off: sweep picks which side of the chord holds the centre.
    sign = 1.0 if sweep else -1.0
    centre = (start + end) / 2.0 + sign * scale * np.array([half[1], -half[0]])
    theta1 = math.atan2(start[1] - centre[1], start[0] - centre[0])
    theta2 = math.atan2(end[1] - centre[1], end[0] - centre[0])
    delta = theta2 - theta1
    if sweep and delta < 0:
        delta += 2 * math.pi
    elif not sweep and delta > 0:
        delta -= 2 * math.pi
    angles = theta1 + np.linspace(0.0, delta, max(int(samples), 2), endpoint=True)
    return np.column_stack([centre[0] + r * np.cos(angles), centre[1] + r * np.sin(angles)])


@dataclass(frozen=True)
class SquirclePath:
    """Ordered, structured path commands for one closed outline."""

    commands: tuple[PathCommand, ...] = field(default_factory=tuple)

    @property
    def closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    def to_svg(self, precision: int = DEFAULT_PRECISION) -> str:
        return format_path(self.commands, precision)

    def count(self, kind: type) -> int:
        return sum(1 for command in self.commands if isinstance(command, kind))

    def translate(self, dx: float, dy: float) -> "SquirclePath":
        """Shift the absolute commands; relative ones follow automatically."""

        moved: List[PathCommand] = []
        for command in self.commands:
            if isinstance(command, MoveTo):
                moved.append(MoveTo((command.point[0] + dx, command.point[1] + dy)))
            elif isinstance(command, LineTo) and not command.relative:
                moved.append(replace(command, point=(command.point[0] + dx, command.point[1] + dy)))
            else:
                moved.append(command)
        return SquirclePath(tuple(moved))

    def sample(self, arc_samples: int = 16, bezier_samples: int = 32) -> np.ndarray:
        if not self.commands:
            return np.zeros((0, 2), dtype=float)
        current = np.zeros(2, dtype=float)
        start = current
        points: list[np.ndarray] = []
        for command in self.commands:
            if isinstance(command, MoveTo):
                current = np.asarray(command.point, dtype=float)
                start = current
                points.append(current.reshape(1, 2))
                continue
            if isinstance(command, LineTo):
                target = np.asarray(command.point, dtype=float)
                end = current + target if command.relative else target
                seg = np.vstack([current, end])
            elif isinstance(command, CubicTo):
                end = current + np.asarray(command.end, dtype=float)
                seg = _sample_cubic(
                    current,
                    current + np.asarray(command.control1, dtype=float),
                    current + np.asarray(command.control2, dtype=float),
                    end,
                    bezier_samples,
                )
            elif isinstance(command, ArcTo):
                end = current + np.asarray(command.end, dtype=float)
                seg = _sample_arc(current, end, command.radius, command.sweep, arc_samples)
            else:
                end = start
                seg = np.vstack([current, end])
            points.append(seg[1:])
            current = end
        return np.vstack(points)

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)`` of the sampled outline."""

        pts = self.sample()
        if pts.shape[0] == 0:
            return (0.0, 0.0, 0.0, 0.0)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return (float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


# Travel direction entering each corner and leaving it, clockwise in screen space (y down).
_CORNER_FRAMES: Mapping[CornerId, tuple[np.ndarray, np.ndarray]] = {
    CornerId.TOP_RIGHT: (np.array([1.0, 0.0]), np.array([0.0, 1.0])),
    CornerId.BOTTOM_RIGHT: (np.array([0.0, 1.0]), np.array([-1.0, 0.0])),
    CornerId.BOTTOM_LEFT: (np.array([-1.0, 0.0]), np.array([0.0, -1.0])),
    CornerId.TOP_LEFT: (np.array([0.0, -1.0]), np.array([1.0, 0.0])),
}


def corner_trace(corner: CornerId, patch: BezierPatch) -> list[PathCommand]:
    """Relative commands that turn one corner: cubic, arc, mirrored cubic."""

    u, v = _CORNER_FRAMES[corner]
    if patch.is_sharp:
        return [LineTo(_pt(patch.p * u), relative=True)]
    a, b, c, d = patch.a, patch.b, patch.c, patch.d
    return [
        CubicTo(_pt(a * u), _pt((a + b) * u), _pt((a + b + c) * u + d * v)),
        ArcTo(patch.radius, _pt(patch.arc_chord * (u + v)), sweep=True),
        CubicTo(_pt(d * u + c * v), _pt(d * u + (b + c) * v), _pt(d * u + (a + b + c) * v)),
    ]


def rectangle_path(width: float, height: float) -> SquirclePath:
    return SquirclePath(
        (
            MoveTo((0.0, 0.0)),
            LineTo((float(width), 0.0)),
            LineTo((float(width), float(height))),
            LineTo((0.0, float(height))),
            LineTo((0.0, 0.0)),
            ClosePath(),
        )
    )


def assemble_path(width: float, height: float, patches: Mapping[CornerId, BezierPatch]) -> SquirclePath:
    """Stitch four corner traces and four straight edges into one closed outline."""

    width = float(width)
    height = float(height)
    if all(patches[corner].is_sharp for corner in CornerId):
        return rectangle_path(width, height)

    tl = patches[CornerId.TOP_LEFT]
    tr = patches[CornerId.TOP_RIGHT]
    br = patches[CornerId.BOTTOM_RIGHT]
    bl = patches[CornerId.BOTTOM_LEFT]

    commands: list[PathCommand] = [MoveTo((width - tr.p, 0.0))]
    commands += corner_trace(CornerId.TOP_RIGHT, tr)
    commands.append(LineTo((width, height - br.p)))
    commands += corner_trace(CornerId.BOTTOM_RIGHT, br)
    commands.append(LineTo((bl.p, height)))
    commands += corner_trace(CornerId.BOTTOM_LEFT, bl)
    commands.append(LineTo((0.0, tl.p)))
    commands += corner_trace(CornerId.TOP_LEFT, tl)
    commands.append(LineTo((width - tr.p, 0.0)))
    commands.append(ClosePath())
    return SquirclePath(tuple(commands))


__all__ = [
    "ArcTo",
    "ClosePath",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "SquirclePath",
    "assemble_path",
    "corner_trace",
    "format_number",
    "format_path",
    "rectangle_path",
]
