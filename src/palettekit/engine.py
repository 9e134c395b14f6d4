from __future__ import annotations

"""Color conversion engine for OKLCH, sRGB and Display-P3.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between OKLCH and sRGB (D65) via OKLab, tests
gamut membership for a target display space, and computes WCAG relative
luminance for contrast math.
"""

import math
from typing import Protocol, Tuple

import numpy as np


OKLCH = Tuple[float, float, float]
SRGB = Tuple[float, float, float]

SRGB_SPACE = "srgb"
DISPLAY_P3_SPACE = "display-p3"
SUPPORTED_SPACES = (SRGB_SPACE, DISPLAY_P3_SPACE)

# OKLab (L, a, b) -> non-linear LMS
_OKLAB_TO_LMS_NONLINEAR = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
# LMS -> linear sRGB
_LMS_TO_LINEAR_SRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)
# linear sRGB -> LMS
_LINEAR_SRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
# non-linear LMS -> OKLab
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
# linear sRGB -> linear Display-P3 (both D65)
_LINEAR_SRGB_TO_LINEAR_P3 = np.array(
    [
        [0.8224621, 0.1775380, 0.0],
        [0.0331941, 0.9668058, 0.0],
        [0.0170827, 0.0723974, 0.9105199],
    ]
)
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

# Numerical slack for the gamut test; conversions of in-gamut colors
# round-trip a few ULPs outside [0, 1].
GAMUT_EPSILON = 1e-6


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def normalize_hue(self, h: float) -> float: ...

    def oklch_to_linear_srgb(self, L: float, C: float, h: float) -> SRGB: ...

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB: ...

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH: ...

    def in_gamut(self, L: float, C: float, h: float, space: str = SRGB_SPACE) -> bool: ...

    def relative_luminance(self, L: float, C: float, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH and sRGB (D65)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return (h % 360.0 + 360.0) % 360.0

    def oklch_to_linear_srgb(self, L: float, C: float, h: float) -> SRGB:
        """Convert OKLCH (L in [0, 100]) to unclipped linear sRGB."""
        L_ok = max(0.0, min(100.0, L)) / 100.0
        C = max(0.0, C)
        h_rad = math.radians(self.normalize_hue(h))
        lab = np.array([L_ok, C * math.cos(h_rad), C * math.sin(h_rad)])
        lms = (_OKLAB_TO_LMS_NONLINEAR @ lab) ** 3
        rl, gl, bl = _LMS_TO_LINEAR_SRGB @ lms
        return (float(rl), float(gl), float(bl))

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB:
        """Convert OKLCH (L in [0, 100]) to gamma-encoded sRGB clipped to [0, 1]."""
        rl, gl, bl = self.oklch_to_linear_srgb(L, C, h)
        return (_linear_to_srgb(rl), _linear_to_srgb(gl), _linear_to_srgb(bl))

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH:
        """Convert sRGB in [0, 1] to OKLCH with L in [0, 100]."""
        linear = np.array([_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)])
        lms = np.cbrt(_LINEAR_SRGB_TO_LMS @ linear)
        L_ok, a_ok, b_ok = (float(v) for v in _LMS_TO_OKLAB @ lms)

        C = math.hypot(a_ok, b_ok)
        if C < 1e-12:
            h_deg = 0.0
        else:
            h_deg = math.degrees(math.atan2(b_ok, a_ok))
        return (max(0.0, min(100.0, L_ok * 100.0)), C, self.normalize_hue(h_deg))

    def in_gamut(self, L: float, C: float, h: float, space: str = SRGB_SPACE) -> bool:
        """Return True when the color is displayable in ``space``."""
        linear = np.array(self.oklch_to_linear_srgb(L, C, h))
        if space == SRGB_SPACE:
            target = linear
        elif space == DISPLAY_P3_SPACE:
            target = _LINEAR_SRGB_TO_LINEAR_P3 @ linear
        else:
            raise ValueError(f"Unsupported gamut space: {space!r}")
        return bool(np.all(target >= -GAMUT_EPSILON) and np.all(target <= 1.0 + GAMUT_EPSILON))

    def relative_luminance(self, L: float, C: float, h: float) -> float:
        """WCAG 2.x relative luminance of the sRGB projection of an OKLCH color."""
        linear = np.clip(np.array(self.oklch_to_linear_srgb(L, C, h)), 0.0, 1.0)
        return float(_LUMINANCE_WEIGHTS @ linear)


def srgb_to_hex(r: float, g: float, b: float) -> str:
    r_i = int(round(max(0.0, min(1.0, r)) * 255))
    g_i = int(round(max(0.0, min(1.0, g)) * 255))
    b_i = int(round(max(0.0, min(1.0, b)) * 255))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    if c <= 0.0:
        return 0.0
    if c >= 1.0:
        return 1.0
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055
