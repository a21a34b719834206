from __future__ import annotations

from squircle.geometry.corners import ADJACENTS, CornerBudget, CornerId, side_length


def adjacent_overlaps(budgets: dict[CornerId, CornerBudget], width: float, height: float) -> list[float]:
    """Return, for every shared edge, how far the two resolved radii overrun it."""
    overruns = []
    for corner, adjacents in ADJACENTS.items():
        for adjacent in adjacents:
            length = side_length(adjacent.side, width, height)
            overruns.append(budgets[corner].radius + budgets[adjacent.corner].radius - length)
    return overruns
