from __future__ import annotations

"""Core color types used by palettekit.

This module defines small immutable records for perceptual (OKLCH) colors
and for the shades that make up a generated design system.
"""

from dataclasses import dataclass
from typing import Tuple


OKLCH = Tuple[float, float, float]


@dataclass(frozen=True)
class PerceptualColor:
    """A color in OKLCH.

    Attributes
    ----------
    lightness:
        Perceptual lightness in [0, 100].
    chroma:
        Colorfulness, non-negative. Practical sRGB colors stay below ~0.37.
    hue:
        Hue angle in degrees. Computed hues lie in [0, 360); parsed input
        may carry an explicit 360.
    """

    lightness: float
    chroma: float
    hue: float

    @classmethod
    def black(cls) -> "PerceptualColor":
        return cls(0.0, 0.0, 0.0)

    def to_oklch(self) -> OKLCH:
        """Return the color as a plain ``(L, C, h)`` tuple."""
        return (self.lightness, self.chroma, self.hue)


@dataclass(frozen=True)
class ColorShade:
    """One named stop of a scale together with its readable foreground.

    Attributes
    ----------
    scale_id:
        Stop identifier such as ``"brand-500"`` or ``"chart-3"``.
    color:
        The background color of the stop (already gamut mapped).
    serialized:
        CSS ``oklch()`` text for ``color``; empty for fallback shades.
    foreground:
        Light or dark text color chosen for the highest contrast on ``color``.
    foreground_serialized:
        CSS text for ``foreground``; empty for fallback shades.
    """

    scale_id: str
    color: PerceptualColor
    serialized: str
    foreground: PerceptualColor
    foreground_serialized: str = ""


@dataclass(frozen=True)
class SemanticColorSet:
    """Color and foreground for one semantic role (success, warning, ...)."""

    color: PerceptualColor
    foreground: PerceptualColor
    serialized: str = ""
    foreground_serialized: str = ""
