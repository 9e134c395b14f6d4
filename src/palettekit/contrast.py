from __future__ import annotations

"""Foreground selection by WCAG contrast.

Every shade gets one of two near-neutral text colors tinted to the
background hue: a light near-white or a dark near-black. The one with the
higher contrast ratio wins, so a shade never ships the worse option even
when the target ratio is out of reach.
"""

from typing import Optional

from .color_types import PerceptualColor
from .engine import ColorEngine, DefaultColorEngine


AA_LARGE = 3.0
AA_NORMAL = 4.5
AAA_NORMAL = 7.0

LIGHT_FOREGROUND_L = 98.0
LIGHT_FOREGROUND_C = 0.01
DARK_FOREGROUND_L = 15.0
DARK_FOREGROUND_C = 0.02


def contrast_ratio(lum_a: float, lum_b: float) -> float:
    """WCAG contrast ratio of two relative luminances (order independent)."""
    hi, lo = (lum_a, lum_b) if lum_a >= lum_b else (lum_b, lum_a)
    return (hi + 0.05) / (lo + 0.05)


def foreground_candidates(background: PerceptualColor) -> tuple[PerceptualColor, PerceptualColor]:
    """Return the (light, dark) text archetypes for ``background``'s hue."""
    h = background.hue
    light = PerceptualColor(LIGHT_FOREGROUND_L, LIGHT_FOREGROUND_C, h)
    dark = PerceptualColor(DARK_FOREGROUND_L, DARK_FOREGROUND_C, h)
    return light, dark


def foreground_contrast(
    background: PerceptualColor,
    foreground: PerceptualColor,
    engine: Optional[ColorEngine] = None,
) -> float:
    """Contrast ratio of ``foreground`` text drawn on ``background``."""
    if engine is None:
        engine = DefaultColorEngine()
    return contrast_ratio(
        engine.relative_luminance(*background.to_oklch()),
        engine.relative_luminance(*foreground.to_oklch()),
    )


def pick_foreground(
    background: PerceptualColor,
    target: float = AA_NORMAL,
    engine: Optional[ColorEngine] = None,
) -> PerceptualColor:
    """Choose the light or dark foreground that best satisfies ``target``.

    The background luminance is computed once and reused for both
    comparisons. Ties go to the light candidate.
    """
    if engine is None:
        engine = DefaultColorEngine()

    bg_lum = engine.relative_luminance(*background.to_oklch())
    light, dark = foreground_candidates(background)
    with_light = contrast_ratio(engine.relative_luminance(*light.to_oklch()), bg_lum)
    with_dark = contrast_ratio(bg_lum, engine.relative_luminance(*dark.to_oklch()))

    if with_light >= target and with_light > with_dark:
        return light
    if with_dark >= target and with_dark > with_light:
        return dark
    # Neither (or both) reach the target: keep the more readable one.
    return light if with_light >= with_dark else dark
