from __future__ import annotations

"""Scale construction for the design-system palette.

Each ``build_*`` function is a pure function of the seed color. None of
them share state, so they can be called in any order. Every shade computes
its background once and derives the foreground from that exact value.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .codec import format_oklch
from .color_types import ColorShade, PerceptualColor, SemanticColorSet
from .contrast import AA_NORMAL, AAA_NORMAL, pick_foreground
from .engine import SRGB_SPACE, ColorEngine, DefaultColorEngine
from .gamut import clamp_to_gamut
from .palette import SemanticColors
from .progression import (
    ANCHOR_STOP,
    BASE_SCALE,
    CHART_CHROMA,
    CHART_HUE_OFFSETS,
    CHART_LIGHTNESS,
    NEUTRAL_CHROMA_STOPS,
    NEUTRAL_LIGHTNESS,
    TONAL_CHROMA_EXPONENT,
    TONAL_CHROMA_MAX,
    TONAL_CHROMA_MIN,
    TONAL_LIGHTNESS_OFFSETS,
    chroma_ceiling,
)
from .semantic import SEMANTIC_CONSTRAINTS, SemanticRole, energy, match_personality, weight

logger = logging.getLogger(__name__)


def make_shade(
    scale_id: str,
    color: PerceptualColor,
    target_contrast: float = AA_NORMAL,
    engine: Optional[ColorEngine] = None,
) -> ColorShade:
    """Wrap ``color`` into a :class:`ColorShade` with its best foreground."""
    fg = pick_foreground(color, target_contrast, engine)
    return ColorShade(
        scale_id=scale_id,
        color=color,
        serialized=format_oklch(color.lightness, color.chroma, color.hue),
        foreground=fg,
        foreground_serialized=format_oklch(fg.lightness, fg.chroma, fg.hue),
    )


def tonal_chroma(seed_L: float, seed_C: float, L: float) -> float:
    """Chroma for a tonal stop at lightness ``L``.

    ``seed_C * (L / seed_L) ** 0.7``, clamped to [0.005, 0.4] and then capped
    by the lightness-band ceilings. A black seed has no usable ratio and
    falls back to the minimum chroma.
    """
    if seed_L <= 0.0:
        chroma = TONAL_CHROMA_MIN
    else:
        chroma = seed_C * (max(0.0, L) / seed_L) ** TONAL_CHROMA_EXPONENT
    chroma = min(max(chroma, TONAL_CHROMA_MIN), TONAL_CHROMA_MAX)
    ceiling = chroma_ceiling(L)
    if ceiling is not None:
        chroma = min(chroma, ceiling)
    return chroma


def build_base_scale(
    seed: PerceptualColor,
    engine: Optional[ColorEngine] = None,
) -> List[ColorShade]:
    """White to near-black neutrals tinted with the seed hue."""
    if engine is None:
        engine = DefaultColorEngine()
    seed_h = engine.normalize_hue(seed.hue)

    shades: List[ColorShade] = []
    for entry in BASE_SCALE:
        # Achromatic stops carry no hue.
        h = 0.0 if entry.chroma == 0.0 else seed_h
        color = PerceptualColor(entry.lightness, entry.chroma, h)
        shades.append(make_shade(f"base-{entry.stop}", color, AA_NORMAL, engine))
    return shades


def build_tonal_scale(
    seed: PerceptualColor,
    space: str = SRGB_SPACE,
    engine: Optional[ColorEngine] = None,
) -> List[ColorShade]:
    """Tints and shades of the seed (``brand-50`` .. ``brand-950``).

    Non-anchor stops are gamut mapped for ``space``. The anchor stop keeps
    the seed lightness and the seed chroma (subject to the same clamps and
    ceilings) so the brand color is reproduced as given.
    """
    if engine is None:
        engine = DefaultColorEngine()
    seed_L, seed_C = seed.lightness, seed.chroma
    h = engine.normalize_hue(seed.hue)

    shades: List[ColorShade] = []
    for entry in TONAL_LIGHTNESS_OFFSETS:
        L = min(max(seed_L + entry.lightness, 0.0), 100.0)
        C = tonal_chroma(seed_L, seed_C, L)
        if entry.stop == ANCHOR_STOP:
            # Reproduces the seed as given, even when the seed is out of gamut.
            color = PerceptualColor(L, C, h)
        else:
            color = clamp_to_gamut(L, C, h, space, engine)
        shades.append(make_shade(f"brand-{entry.stop}", color, AA_NORMAL, engine))
    return shades


def build_neutral_scale(
    seed: PerceptualColor,
    space: str = SRGB_SPACE,
    engine: Optional[ColorEngine] = None,
) -> List[ColorShade]:
    """Near-gray ramp that borrows only the seed hue."""
    if engine is None:
        engine = DefaultColorEngine()
    h = engine.normalize_hue(seed.hue)

    shades: List[ColorShade] = []
    for entry, C in zip(NEUTRAL_LIGHTNESS, NEUTRAL_CHROMA_STOPS):
        color = clamp_to_gamut(entry.lightness, C, h, space, engine)
        shades.append(make_shade(f"neutral-{entry.stop}", color, AA_NORMAL, engine))
    return shades


def build_semantic_colors(
    seed: PerceptualColor,
    space: str = SRGB_SPACE,
    engine: Optional[ColorEngine] = None,
) -> SemanticColors:
    """Role colors at fixed hues, matched to the seed's weight and energy.

    Foregrounds use the AAA ratio.
    """
    if engine is None:
        engine = DefaultColorEngine()
    target_weight = weight(seed.lightness, seed.chroma)
    target_energy = energy(seed.lightness, seed.chroma)

    sets: Dict[str, SemanticColorSet] = {}
    for role in SemanticRole:
        constraint = SEMANTIC_CONSTRAINTS[role]
        L, C = match_personality(constraint, target_weight, target_energy)
        color = clamp_to_gamut(L, C, constraint.hue, space, engine)
        fg = pick_foreground(color, AAA_NORMAL, engine)
        sets[role.value] = SemanticColorSet(
            color=color,
            foreground=fg,
            serialized=format_oklch(color.lightness, color.chroma, color.hue),
            foreground_serialized=format_oklch(fg.lightness, fg.chroma, fg.hue),
        )
        logger.debug("semantic %s -> L=%.2f C=%.4f", role.value, color.lightness, color.chroma)
    return SemanticColors(**sets)


def chart_hues(seed_hue: float, engine: Optional[ColorEngine] = None) -> Tuple[float, ...]:
    """Nominal chart hues, in order, normalized into [0, 360)."""
    if engine is None:
        engine = DefaultColorEngine()
    return tuple(engine.normalize_hue(seed_hue + offset) for offset in CHART_HUE_OFFSETS)


def build_chart_scale(
    seed: PerceptualColor,
    space: str = SRGB_SPACE,
    engine: Optional[ColorEngine] = None,
) -> List[ColorShade]:
    """Five data-visualization colors sharing one tone."""
    if engine is None:
        engine = DefaultColorEngine()

    shades: List[ColorShade] = []
    for index, h in enumerate(chart_hues(seed.hue, engine)):
        color = clamp_to_gamut(CHART_LIGHTNESS, CHART_CHROMA, h, space, engine)
        shades.append(make_shade(f"chart-{index + 1}", color, AA_NORMAL, engine))
    return shades
