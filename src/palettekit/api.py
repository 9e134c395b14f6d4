from __future__ import annotations

"""High-level public API for generating design-system palettes.

:func:`build_palette` is the sole boundary between the scale builders and
their callers: every failure, expected or not, becomes the complete
fallback palette plus a log record, never an exception.
"""

import logging
from collections import OrderedDict
from typing import Optional, Tuple

from common import settings

from .builder import (
    build_base_scale,
    build_chart_scale,
    build_neutral_scale,
    build_semantic_colors,
    build_tonal_scale,
)
from .codec import ParseError, RangeViolation, parse_seed
from .engine import ColorEngine, DefaultColorEngine
from .palette import GENERATED_NAME, Palette, fallback_palette

logger = logging.getLogger(__name__)


def build_palette(
    seed_text: str,
    space: Optional[str] = None,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate the full color system from a seed ``oklch()`` string.

    Parameters
    ----------
    seed_text:
        Seed color, e.g. ``"oklch(49.6% 0.272 303.89)"``.
    space:
        Gamut used for mapping generated shades (``"srgb"`` or
        ``"display-p3"``). Defaults to ``settings.get().GAMUT_SPACE``.
    engine:
        Optional ColorEngine for conversions. If None,
        DefaultColorEngine is used.

    Returns
    -------
    Palette
        The generated palette, or :func:`fallback_palette` when the seed is
        rejected or when
        construction fails.
    """
    if space is None:
        space = settings.get().GAMUT_SPACE
    if engine is None:
        engine = DefaultColorEngine()

    try:
        seed = parse_seed(seed_text)
    except (ParseError, RangeViolation) as exc:
        logger.warning("Rejected seed color %r: %s", seed_text, exc)
        return fallback_palette(str(exc))

    try:
        base = build_base_scale(seed, engine)
        tonal = build_tonal_scale(seed, space, engine)
        semantic = build_semantic_colors(seed, space, engine)
        neutral = build_neutral_scale(seed, space, engine)
        chart = build_chart_scale(seed, space, engine)
    except Exception as exc:
        logger.exception("Error building palette from %r", seed_text)
        return fallback_palette(str(exc) or type(exc).__name__)

    logger.debug("Built palette from %r (space=%s)", seed_text, space)
    return Palette(
        name=GENERATED_NAME,
        description=f"A complete color system derived from {seed_text}",
        base_scale=tuple(base),
        tonal_scale=tuple(tonal),
        neutral_scale=tuple(neutral),
        semantic_colors=semantic,
        chart_scale=tuple(chart),
    )


class PaletteCache:
    """Caller-owned LRU of ``(seed_text, space) -> Palette``.

    Useful for reactive stores that rebuild on every seed change.
    ``maxsize=0`` disables caching.
    """

    def __init__(self, maxsize: Optional[int] = None, engine: Optional[ColorEngine] = None) -> None:
        if maxsize is None:
            maxsize = settings.get().CACHE_MAXSIZE
        self.maxsize = max(0, int(maxsize))
        self._engine = engine
        self._od: "OrderedDict[Tuple[str, str], Palette]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._od)

    def get_or_build(self, seed_text: str, space: Optional[str] = None) -> Palette:
        if space is None:
            space = settings.get().GAMUT_SPACE
        key = (seed_text, space)
        hit = self._od.get(key)
        if hit is not None:
            self._od.move_to_end(key)
            return hit
        palette = build_palette(seed_text, space, self._engine)
        if self.maxsize > 0:
            self._od[key] = palette
            if len(self._od) > self.maxsize:
                self._od.popitem(last=False)
        return palette

    def clear(self) -> None:
        self._od.clear()
