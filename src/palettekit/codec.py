from __future__ import annotations

"""Parsing and formatting of CSS ``oklch()`` color text.

The canonical internal representation keeps lightness on a 0..100 scale.
``parse_oklch`` accepts ``oklch(<L>[%] <C> <H>)``; a bare lightness numeral
is already read on the percent scale, so ``oklch(50 0.1 200)`` and
``oklch(50% 0.1 200)`` are the same color. ``format_oklch`` always renders
``L`` as a percentage with one decimal, ``C`` with three and ``H`` with two.
"""

import math
import re

from .color_types import PerceptualColor


MAX_LIGHTNESS = 100.0
# Formatting/validation ceiling; sRGB colors stay below ~0.37.
MAX_CHROMA = 0.5
MAX_HUE = 360.0

_OKLCH_RE = re.compile(
    r"oklch\(\s*([0-9.]+)(%?)\s+([0-9.]+)\s+([0-9.]+)\s*\)",
    re.IGNORECASE,
)


class ParseError(ValueError):
    """Raised when text is not a well-formed ``oklch()`` color."""


class RangeViolation(ValueError):
    """Raised when a parsed color lies outside the legal L/C/H ranges."""


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Clamp ``value`` into ``[min_value, max_value]``."""
    return min(max(value, min_value), max_value)


def parse_oklch(text: str) -> PerceptualColor:
    """Parse ``oklch(L% C H)`` text into a :class:`PerceptualColor`.

    Raises
    ------
    ParseError
        If the text does not match the grammar or a component is not a
        number (e.g. ``"1.2.3"``).
    """
    if not isinstance(text, str):
        raise ParseError(f"Invalid OKLCH format: {text!r}")
    match = _OKLCH_RE.fullmatch(text.strip())
    if match is None:
        raise ParseError(f"Invalid OKLCH format: {text!r}")
    l_raw, _percent, c_raw, h_raw = match.groups()
    try:
        # With or without "%", the numeral is on the percent scale.
        lightness = float(l_raw)
        chroma = float(c_raw)
        hue = float(h_raw)
    except ValueError as exc:
        raise ParseError(f"Invalid OKLCH component in {text!r}") from exc
    return PerceptualColor(lightness=lightness, chroma=chroma, hue=hue)


def format_oklch(lightness: float, chroma: float, hue: float) -> str:
    """Render OKLCH components as CSS text, e.g. ``oklch(49.6% 0.272 303.89)``.

    Lightness is clamped to [0, 100], chroma to [0, MAX_CHROMA] and hue is
    wrapped into [0, 360) after rounding, so 360 renders as 0.
    """
    l_out = clamp(lightness, 0.0, MAX_LIGHTNESS)
    c_out = clamp(chroma, 0.0, MAX_CHROMA)
    # Wrap again after rounding: 359.996 and -1e-15 both round up to 360.
    h_out = round(hue % MAX_HUE, 2) % MAX_HUE
    return f"oklch({l_out:.1f}% {c_out:.3f} {h_out:.2f})"


def validate_oklch(color: PerceptualColor) -> bool:
    """Range check only; gamut membership is not tested here."""
    values = (color.lightness, color.chroma, color.hue)
    if not all(math.isfinite(v) for v in values):
        return False
    return (
        0.0 <= color.lightness <= MAX_LIGHTNESS
        and 0.0 <= color.chroma <= MAX_CHROMA
        and 0.0 <= color.hue <= MAX_HUE
    )


def ensure_valid(color: PerceptualColor) -> PerceptualColor:
    """Return ``color`` unchanged or raise :class:`RangeViolation`."""
    if not validate_oklch(color):
        raise RangeViolation(
            "OKLCH values out of range: "
            f"L={color.lightness!r} C={color.chroma!r} H={color.hue!r}"
        )
    return color


def parse_seed(text: str) -> PerceptualColor:
    """Parse and range-check a seed color in one step."""
    return ensure_valid(parse_oklch(text))


def normalize_input_hue(hue: float) -> float:
    """Wrap a hue typed by a user into [0, 360], keeping an explicit 360.

    Output paths use :func:`format_oklch` or ``ColorEngine.normalize_hue``,
    which both collapse 360 to 0.
    """
    normalized = hue % MAX_HUE
    if normalized == 0.0 and hue == MAX_HUE:
        return MAX_HUE
    return normalized
