"""Public entrypoint for the palettekit design-system library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palettekit`` instead of individual
submodules.
"""

from .api import PaletteCache, build_palette
from .codec import (
    ParseError,
    RangeViolation,
    clamp,
    format_oklch,
    normalize_input_hue,
    parse_oklch,
    validate_oklch,
)
from .color_types import ColorShade, PerceptualColor, SemanticColorSet
from .contrast import AA_LARGE, AA_NORMAL, AAA_NORMAL, foreground_contrast, pick_foreground
from .engine import ColorEngine, DefaultColorEngine
from .gamut import clamp_to_gamut
from .palette import Palette, SemanticColors, fallback_palette
from .semantic import SemanticRole, compute_personality
from .ui_helpers import EXPORT_FORMAT_OPTIONS, ExportFormat, export_palette, preview_colors

__all__ = [
    "build_palette",
    "PaletteCache",
    "parse_oklch",
    "format_oklch",
    "validate_oklch",
    "clamp",
    "normalize_input_hue",
    "ParseError",
    "RangeViolation",
    "PerceptualColor",
    "ColorShade",
    "SemanticColorSet",
    "SemanticColors",
    "Palette",
    "fallback_palette",
    "SemanticRole",
    "compute_personality",
    "pick_foreground",
    "foreground_contrast",
    "AA_LARGE",
    "AA_NORMAL",
    "AAA_NORMAL",
    "ColorEngine",
    "DefaultColorEngine",
    "clamp_to_gamut",
    "ExportFormat",
    "export_palette",
    "preview_colors",
    "EXPORT_FORMAT_OPTIONS",
]
