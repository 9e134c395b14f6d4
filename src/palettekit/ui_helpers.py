from __future__ import annotations

"""Helper utilities for integrating palettekit into external UIs.

This module exposes label/enum pairs for export formats, a public
`export_palette` helper that flattens a Palette into simple color values
keyed by shade id, and a live-preview helper for color input widgets.
"""

import math
from enum import Enum
from typing import Dict, List, Optional

from .codec import format_oklch
from .color_types import PerceptualColor
from .contrast import AAA_NORMAL, pick_foreground
from .engine import ColorEngine, DefaultColorEngine, srgb_to_hex
from .palette import Palette


class ExportFormat(Enum):
    """Supported output formats for exported color maps."""

    OKLCH = "oklch"
    HEX = "hex"
    SRGB_01 = "srgb"
    SRGB_255 = "srgb255"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("OKLCH", ExportFormat.OKLCH),
    ("HEX", ExportFormat.HEX),
    ("sRGB (0-1)", ExportFormat.SRGB_01),
    ("sRGB (0-255)", ExportFormat.SRGB_255),
]


def _convert(
    color: PerceptualColor,
    serialized: str,
    fmt: ExportFormat,
    engine: ColorEngine,
) -> object:
    if fmt == ExportFormat.OKLCH:
        return serialized
    r, g, b = engine.oklch_to_srgb(*color.to_oklch())
    if fmt == ExportFormat.HEX:
        return srgb_to_hex(r, g, b)
    if fmt == ExportFormat.SRGB_01:
        return (r, g, b)
    if fmt == ExportFormat.SRGB_255:
        return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))
    raise ValueError(f"Unsupported export format: {fmt}")


def export_palette(
    palette: Palette,
    fmt: ExportFormat | str,
    engine: Optional[ColorEngine] = None,
) -> Dict[str, object]:
    """Flatten a Palette into ``{shade id: color}`` in the desired format.

    Shades appear in palette order (base, brand, neutral, chart); semantic
    roles are keyed by role name and come last.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if engine is None:
        engine = DefaultColorEngine()

    out: Dict[str, object] = {}
    for shade in palette.shades():
        out[shade.scale_id] = _convert(shade.color, shade.serialized, export_fmt, engine)
    for role, cs in palette.semantic_colors.items():
        out[role] = _convert(cs.color, cs.serialized, export_fmt, engine)
    return out


def preview_colors(
    lightness: float,
    chroma: float,
    hue: float,
    engine: Optional[ColorEngine] = None,
) -> Dict[str, str]:
    """Background/foreground CSS pair for a color being edited.

    Falls back to ``transparent``/``currentColor`` when the values cannot
    be rendered (e.g. NaN from an empty input field).
    """
    if not all(math.isfinite(v) for v in (lightness, chroma, hue)):
        return {"bg": "transparent", "fg": "currentColor"}
    bg = PerceptualColor(lightness, chroma, hue)
    fg = pick_foreground(bg, AAA_NORMAL, engine)
    return {
        "bg": format_oklch(lightness, chroma, hue),
        "fg": format_oklch(fg.lightness, fg.chroma, fg.hue),
    }


__all__ = [
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "export_palette",
    "preview_colors",
]
