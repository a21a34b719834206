"""Corner identities, their adjacency graph, and radius budget resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Mapping

Side = Literal["top", "right", "bottom", "left"]


class CornerId(Enum):
    # Declaration order doubles as the tie-break order when radii are equal.
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


@dataclass(frozen=True)
class Adjacent:
    corner: CornerId
    side: Side


ADJACENTS: Mapping[CornerId, tuple[Adjacent, Adjacent]] = {
    CornerId.TOP_LEFT: (Adjacent(CornerId.TOP_RIGHT, "top"), Adjacent(CornerId.BOTTOM_LEFT, "left")),
    CornerId.TOP_RIGHT: (Adjacent(CornerId.TOP_LEFT, "top"), Adjacent(CornerId.BOTTOM_RIGHT, "right")),
    CornerId.BOTTOM_LEFT: (Adjacent(CornerId.BOTTOM_RIGHT, "bottom"), Adjacent(CornerId.TOP_LEFT, "left")),
    CornerId.BOTTOM_RIGHT: (Adjacent(CornerId.BOTTOM_LEFT, "bottom"), Adjacent(CornerId.TOP_RIGHT, "right")),
}


@dataclass(frozen=True)
class CornerRadii:
    top_left: float = 0.0
    top_right: float = 0.0
    bottom_right: float = 0.0
    bottom_left: float = 0.0

    @classmethod
    def uniform(cls, radius: float) -> "CornerRadii":
        r = float(radius)
        return cls(r, r, r, r)

    @classmethod
    def from_mapping(cls, values: Mapping[CornerId, float]) -> "CornerRadii":
        return cls(
            top_left=float(values.get(CornerId.TOP_LEFT, 0.0)),
            top_right=float(values.get(CornerId.TOP_RIGHT, 0.0)),
            bottom_right=float(values.get(CornerId.BOTTOM_RIGHT, 0.0)),
            bottom_left=float(values.get(CornerId.BOTTOM_LEFT, 0.0)),
        )

    def __getitem__(self, corner: CornerId) -> float:
        return getattr(self, corner.name.lower())

    def as_dict(self) -> dict[CornerId, float]:
        return {corner: self[corner] for corner in CornerId}

    def is_uniform(self) -> bool:
        return self.top_left == self.top_right == self.bottom_right == self.bottom_left


@dataclass(frozen=True)
class CornerBudget:
    """Resolved radius and the edge extent a corner may occupy."""

    radius: float
    budget: float


def side_length(side: Side, width: float, height: float) -> float:
    return width if side in ("top", "bottom") else height


def uniform_budgets(radius: float, width: float, height: float) -> dict[CornerId, CornerBudget]:
    """Budgets for four equal radii: half the shorter side each."""

    budget = min(width, height) / 2.0
    resolved = CornerBudget(radius=min(float(radius), budget), budget=budget)
    return {corner: resolved for corner in CornerId}


def solve_budgets(radii: CornerRadii, width: float, height: float) -> dict[CornerId, CornerBudget]:
    """Resolve per-corner budgets so neighbouring corners never overlap.

    Corners are visited largest radius first; a corner whose neighbour has
    already been resolved gets the remainder of the shared edge, otherwise
    the edge is split in proportion to the two requested radii.
    """

    requested = radii.as_dict()
    current = dict(requested)
    budgets: dict[CornerId, float] = {}
    # sorted() is stable, so ties keep enum declaration order.
    order = sorted(CornerId, key=lambda corner: requested[corner], reverse=True)
    for corner in order:
        radius = requested[corner]
        candidates = []
        for adjacent in ADJACENTS[corner]:
            neighbour_radius = current[adjacent.corner]
            length = side_length(adjacent.side, width, height)
            if radius == 0 and neighbour_radius == 0:
                candidates.append(0.0)
            elif adjacent.corner in budgets:
                candidates.append(length - budgets[adjacent.corner])
            else:
                candidates.append(radius / (radius + neighbour_radius) * length)
        budget = min(candidates)
        budgets[corner] = budget
        current[corner] = min(radius, budget)

    return {corner: CornerBudget(radius=current[corner], budget=budgets[corner]) for corner in CornerId}


__all__ = [
    "ADJACENTS",
    "Adjacent",
    "CornerBudget",
    "CornerId",
    "CornerRadii",
    "side_length",
    "solve_budgets",
    "uniform_budgets",
]
