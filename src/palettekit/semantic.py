from __future__ import annotations

"""Semantic role colors (success, warning, error, info).

Each role has a fixed hue and an allowed lightness/chroma rectangle. Inside
that rectangle the color is nudged so its perceived weight and energy
roughly match the seed color, which keeps status colors visually in step
with the brand.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class SemanticRole(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class RoleConstraint:
    hue: float
    lightness: Tuple[float, float]
    chroma: Tuple[float, float]

    @property
    def midpoint(self) -> Tuple[float, float]:
        return (
            (self.lightness[0] + self.lightness[1]) / 2.0,
            (self.chroma[0] + self.chroma[1]) / 2.0,
        )


SEMANTIC_CONSTRAINTS: Dict[SemanticRole, RoleConstraint] = {
    SemanticRole.SUCCESS: RoleConstraint(hue=140.0, lightness=(45.0, 70.0), chroma=(0.12, 0.20)),
    SemanticRole.WARNING: RoleConstraint(hue=70.0, lightness=(65.0, 80.0), chroma=(0.10, 0.18)),
    SemanticRole.ERROR: RoleConstraint(hue=25.0, lightness=(50.0, 65.0), chroma=(0.18, 0.25)),
    SemanticRole.INFO: RoleConstraint(hue=240.0, lightness=(45.0, 65.0), chroma=(0.15, 0.22)),
}

MATCH_ITERATIONS = 5
MATCH_TOLERANCE = 0.10
LIGHTNESS_STEP = 5.0
WEIGHT_CHROMA_STEP = 0.10
ENERGY_CHROMA_STEP = 0.05


@dataclass(frozen=True)
class Personality:
    weight: float
    energy: float
    saturation_level: str


def weight(L: float, C: float) -> float:
    """Perceived heaviness: darker and more chromatic is heavier."""
    return (100.0 - L) * C


def energy(L: float, C: float, base_L: float = 50.0) -> float:
    """Perceived vividness: brighter and more chromatic is more energetic."""
    return C * math.sqrt(max(0.0, L) / base_L)


def compute_personality(L: float, C: float) -> Personality:
    if C > 0.2:
        level = "high"
    elif C > 0.1:
        level = "medium"
    else:
        level = "low"
    return Personality(weight=weight(L, C), energy=energy(L, C), saturation_level=level)


def match_personality(
    constraint: RoleConstraint,
    target_weight: float,
    target_energy: float,
    iterations: int = MATCH_ITERATIONS,
) -> Tuple[float, float]:
    """Nudge a role's (L, C) toward the target weight and energy.

    Starts from the rectangle midpoint and runs a fixed number of steps;
    every step keeps the values inside the role rectangle, so the result
    is always in bounds even when the targets are unreachable.
    """
    l_min, l_max = constraint.lightness
    c_min, c_max = constraint.chroma
    L, C = constraint.midpoint
    lo, hi = 1.0 - MATCH_TOLERANCE, 1.0 + MATCH_TOLERANCE

    for _ in range(iterations):
        current_weight = weight(L, C)
        current_energy = energy(L, C)

        if current_weight < target_weight * lo:
            L = max(l_min, L - LIGHTNESS_STEP)
            C = min(c_max, C * (1.0 + WEIGHT_CHROMA_STEP))
        elif current_weight > target_weight * hi:
            L = min(l_max, L + LIGHTNESS_STEP)
            C = max(c_min, C * (1.0 - WEIGHT_CHROMA_STEP))

        if current_energy < target_energy * lo:
            C = min(c_max, C * (1.0 + ENERGY_CHROMA_STEP))
        elif current_energy > target_energy * hi:
            C = max(c_min, C * (1.0 - ENERGY_CHROMA_STEP))

        L = min(max(L, l_min), l_max)
        C = min(max(C, c_min), c_max)

    return L, C
