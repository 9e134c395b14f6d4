from __future__ import annotations

import math

import pytest

from palettekit.semantic import (
    SEMANTIC_CONSTRAINTS,
    SemanticRole,
    compute_personality,
    energy,
    match_personality,
    weight,
)


def test_weight_and_energy() -> None:
    assert weight(50.0, 0.2) == pytest.approx(10.0)
    assert weight(100.0, 0.3) == 0.0
    assert energy(50.0, 0.2) == pytest.approx(0.2)
    assert energy(200.0, 0.1) == pytest.approx(0.2)
    assert energy(0.0, 0.3) == 0.0


def test_compute_personality_levels() -> None:
    assert compute_personality(50.0, 0.25).saturation_level == "high"
    assert compute_personality(50.0, 0.15).saturation_level == "medium"
    assert compute_personality(50.0, 0.05).saturation_level == "low"
    p = compute_personality(60.0, 0.1)
    assert p.weight == pytest.approx(4.0)
    assert p.energy == pytest.approx(0.1 * math.sqrt(1.2))


def test_constraints_cover_all_roles() -> None:
    assert set(SEMANTIC_CONSTRAINTS) == set(SemanticRole)
    assert SEMANTIC_CONSTRAINTS[SemanticRole.ERROR].hue == 25.0


def test_matched_target_keeps_midpoint() -> None:
    cons = SEMANTIC_CONSTRAINTS[SemanticRole.INFO]
    L0, C0 = cons.midpoint
    L, C = match_personality(cons, weight(L0, C0), energy(L0, C0))
    assert (L, C) == pytest.approx((L0, C0))


def test_heavy_target_drives_to_dark_saturated_corner() -> None:
    cons = SEMANTIC_CONSTRAINTS[SemanticRole.SUCCESS]
    L, C = match_personality(cons, math.inf, math.inf)
    assert L == cons.lightness[0]
    assert C == cons.chroma[1]


def test_light_target_drives_to_light_muted_corner() -> None:
    cons = SEMANTIC_CONSTRAINTS[SemanticRole.SUCCESS]
    L, C = match_personality(cons, 0.0, 0.0)
    assert L == cons.lightness[1]
    assert C == cons.chroma[0]


@pytest.mark.parametrize("role", list(SemanticRole))
@pytest.mark.parametrize("target", [(0.0, 0.0), (3.0, 0.05), (12.0, 0.3), (40.0, 1.0)])
def test_match_stays_in_bounds(role: SemanticRole, target: tuple[float, float]) -> None:
    cons = SEMANTIC_CONSTRAINTS[role]
    L, C = match_personality(cons, *target)
    assert cons.lightness[0] <= L <= cons.lightness[1]
    assert cons.chroma[0] <= C <= cons.chroma[1]
