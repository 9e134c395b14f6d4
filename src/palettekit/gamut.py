from __future__ import annotations

"""Gamut handling utilities for OKLCH colors.

:func:`clamp_to_gamut` maps an out-of-gamut color to the displayable color
with the same lightness and hue and the largest chroma that still fits the
target space. It is total: any finite input yields an in-range color.
"""

from typing import Optional, Tuple

from .color_types import PerceptualColor
from .engine import SRGB_SPACE, ColorEngine, DefaultColorEngine


OKLCH = Tuple[float, float, float]

# Chroma resolution of the bisection; well below the 3-decimal output precision.
CHROMA_RESOLUTION = 1e-5


def clamp_to_gamut(
    L: float,
    C: float,
    h: float,
    space: str = SRGB_SPACE,
    engine: Optional[ColorEngine] = None,
    max_iter: int = 32,
) -> PerceptualColor:
    """Reduce chroma until (L, C, h) is displayable in ``space``.

    Lightness is clamped to [0, 100] and hue normalized to [0, 360); both are
    otherwise preserved. Extreme lightness yields an achromatic color.
    """
    if engine is None:
        engine = DefaultColorEngine()

    L = max(0.0, min(100.0, L))
    C = max(0.0, C)
    h_norm = engine.normalize_hue(h)

    if L <= 0.0 or L >= 100.0:
        return PerceptualColor(L, 0.0, h_norm)
    if engine.in_gamut(L, C, h_norm, space):
        return PerceptualColor(L, C, h_norm)

    lo, hi = 0.0, C
    for _ in range(max_iter):
        if hi - lo <= CHROMA_RESOLUTION:
            break
        mid = (lo + hi) / 2.0
        if engine.in_gamut(L, mid, h_norm, space):
            lo = mid
        else:
            hi = mid
    return PerceptualColor(L, lo, h_norm)


def to_srgb_gamut_safe(
    engine: ColorEngine,
    L: float,
    C: float,
    h: float,
) -> Tuple[float, float, float, OKLCH]:
    """Convert OKLCH to in-gamut sRGB.

    Returns (r, g, b, (L_adj, C_adj, h_adj)).
    """
    mapped = clamp_to_gamut(L, C, h, SRGB_SPACE, engine)
    r, g, b = engine.oklch_to_srgb(*mapped.to_oklch())
    return r, g, b, mapped.to_oklch()
