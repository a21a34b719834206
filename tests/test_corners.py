from __future__ import annotations

import itertools

import numpy as np

from squircle.geometry.corners import ADJACENTS, CornerId, CornerRadii, solve_budgets, uniform_budgets
from tests.helpers import adjacent_overlaps


def test_adjacency_graph_is_symmetric():
    for corner, adjacents in ADJACENTS.items():
        assert len(adjacents) == 2
        for adjacent in adjacents:
            back = [entry for entry in ADJACENTS[adjacent.corner] if entry.corner is corner]
            assert len(back) == 1
            assert back[0].side == adjacent.side


def test_uniform_budget_is_half_shorter_side():
    budgets = uniform_budgets(60, 100, 40)
    for entry in budgets.values():
        assert entry.budget == 20
        assert entry.radius == 20


def test_larger_corner_claims_first():
    radii = CornerRadii(top_left=80, top_right=40)
    budgets = solve_budgets(radii, 100, 100)
    assert np.isclose(budgets[CornerId.TOP_LEFT].budget, 200 / 3)
    assert np.isclose(budgets[CornerId.TOP_LEFT].radius, 200 / 3)
    assert np.isclose(budgets[CornerId.TOP_RIGHT].budget, 100 / 3)
    assert np.isclose(budgets[CornerId.TOP_RIGHT].radius, 100 / 3)
    assert budgets[CornerId.BOTTOM_LEFT].budget == 0
    assert budgets[CornerId.BOTTOM_RIGHT].budget == 0


def test_oversized_corner_clamped_to_short_edge():
    budgets = solve_budgets(CornerRadii(top_left=60), 100, 40)
    resolved = budgets[CornerId.TOP_LEFT]
    assert resolved.radius < 60
    assert resolved.radius <= 40
    assert resolved.radius <= resolved.budget


def test_equal_claims_split_edge():
    budgets = solve_budgets(CornerRadii(top_left=60, top_right=60), 100, 100)
    assert np.isclose(budgets[CornerId.TOP_LEFT].radius, 50)
    assert np.isclose(budgets[CornerId.TOP_RIGHT].radius, 50)


def test_tie_break_follows_declaration_order():
    # Among the tied corners top-left resolves before top-right.
    budgets = solve_budgets(CornerRadii(top_left=30, top_right=30, bottom_left=90), 100, 100)
    tl = budgets[CornerId.TOP_LEFT]
    tr = budgets[CornerId.TOP_RIGHT]
    bl = budgets[CornerId.BOTTOM_LEFT]
    assert np.isclose(bl.budget, 75)
    assert np.isclose(tl.budget, 25)
    assert np.isclose(tr.budget, 75)
    assert np.isclose(tl.radius, 25)
    assert np.isclose(tr.radius, 30)


def test_resolved_radii_never_overlap_exhaustive():
    values = [0.0, 10.0, 35.0, 60.0, 120.0]
    for width, height in [(100.0, 60.0), (40.0, 200.0), (1.0, 1.0)]:
        for combo in itertools.product(values, repeat=4):
            radii = CornerRadii(*combo)
            budgets = solve_budgets(radii, width, height)
            assert max(adjacent_overlaps(budgets, width, height)) <= 1e-9
            for corner, entry in budgets.items():
                assert entry.radius <= radii[corner]
                assert entry.radius <= entry.budget + 1e-12
                assert entry.radius >= 0
