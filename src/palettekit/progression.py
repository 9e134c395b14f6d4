from __future__ import annotations

"""Static stop tables for the generated scales.

Tonal (brand) stops carry lightness *offsets* from the seed; base and
neutral stops carry absolute values and only borrow the seed hue. Chart
colors are defined by hue offsets around the seed and one shared tone.
"""

from dataclasses import dataclass
from typing import List, Tuple


STOPS: Tuple[str, ...] = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")

# Stop whose offset is zero; it reproduces the seed.
ANCHOR_STOP = "500"


@dataclass(frozen=True)
class LightnessStop:
    stop: str
    lightness: float


@dataclass(frozen=True)
class BaseStop:
    stop: str
    lightness: float
    chroma: float


TONAL_LIGHTNESS_OFFSETS: List[LightnessStop] = [
    LightnessStop("50", 45.4),
    LightnessStop("100", 40.4),
    LightnessStop("200", 30.4),
    LightnessStop("300", 20.4),
    LightnessStop("400", 10.4),
    LightnessStop("500", 0.0),
    LightnessStop("600", -7.6),
    LightnessStop("700", -14.6),
    LightnessStop("800", -21.6),
    LightnessStop("900", -29.6),
    LightnessStop("950", -37.6),
]

NEUTRAL_LIGHTNESS: List[LightnessStop] = [
    LightnessStop("50", 98.0),
    LightnessStop("100", 95.0),
    LightnessStop("200", 88.0),
    LightnessStop("300", 78.0),
    LightnessStop("400", 65.0),
    LightnessStop("500", 52.0),
    LightnessStop("600", 42.0),
    LightnessStop("700", 32.0),
    LightnessStop("800", 22.0),
    LightnessStop("900", 15.0),
    LightnessStop("950", 8.0),
]

# Low-high-low, peaking at the mid stops.
NEUTRAL_CHROMA_STOPS: Tuple[float, ...] = (
    0.005, 0.008, 0.012, 0.018, 0.022, 0.025, 0.022, 0.018, 0.012, 0.008, 0.005,
)

BASE_SCALE: List[BaseStop] = [
    BaseStop("50", 100.0, 0.0),  # pure white
    BaseStop("100", 99.0, 0.001),
    BaseStop("200", 98.0, 0.002),
    BaseStop("300", 97.0, 0.004),
    BaseStop("400", 94.0, 0.006),
    BaseStop("500", 50.0, 0.0),  # mid gray
    BaseStop("600", 40.0, 0.005),
    BaseStop("700", 30.0, 0.004),
    BaseStop("800", 20.0, 0.003),
    BaseStop("900", 10.0, 0.002),
    BaseStop("950", 5.0, 0.001),
]

# Tonal chroma law: C = C_seed * (L / L_seed) ** TONAL_CHROMA_EXPONENT
TONAL_CHROMA_EXPONENT = 0.7
TONAL_CHROMA_MIN = 0.005
TONAL_CHROMA_MAX = 0.4

# (lightness threshold, chroma ceiling); first matching band wins.
LIGHT_CHROMA_CEILINGS: Tuple[Tuple[float, float], ...] = (
    (90.0, 0.05),
    (80.0, 0.08),
    (70.0, 0.12),
    (60.0, 0.20),
)
DARK_CHROMA_CEILINGS: Tuple[Tuple[float, float], ...] = (
    (20.0, 0.08),
    (28.0, 0.14),
)

CHART_HUE_OFFSETS: Tuple[float, ...] = (30.0, 90.0, 180.0, 270.0, -30.0)
CHART_LIGHTNESS = 72.0
CHART_CHROMA = 0.18


def chroma_ceiling(lightness: float) -> float | None:
    """Empirical chroma ceiling for a tonal stop, or None inside the free band."""
    for threshold, ceiling in LIGHT_CHROMA_CEILINGS:
        if lightness >= threshold:
            return ceiling
    for threshold, ceiling in DARK_CHROMA_CEILINGS:
        if lightness <= threshold:
            return ceiling
    return None
