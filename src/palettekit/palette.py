from __future__ import annotations

"""Container types for generated design-system palettes.

A :class:`Palette` is a pure value derived from one seed color. It is
never partially populated: invalid input produces :func:`fallback_palette`,
which has the same shape as a real palette.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from .color_types import ColorShade, PerceptualColor, SemanticColorSet
from .progression import CHART_HUE_OFFSETS, STOPS
from .semantic import SemanticRole


FALLBACK_NAME = "Invalid Palette"
GENERATED_NAME = "Generated Palette"


@dataclass(frozen=True)
class SemanticColors:
    """Color sets for the four semantic roles."""

    success: SemanticColorSet
    warning: SemanticColorSet
    error: SemanticColorSet
    info: SemanticColorSet

    def items(self) -> List[Tuple[str, SemanticColorSet]]:
        return [(role.value, getattr(self, role.value)) for role in SemanticRole]


@dataclass(frozen=True)
class Palette:
    """Generated color system.

    Attributes
    ----------
    name, description:
        Human readable labels; the description names the seed.
    base_scale:
        11 near-white to near-black shades lightly tinted with the seed hue.
    tonal_scale:
        11 tints/shades of the seed itself (``brand-*``).
    neutral_scale:
        11 low-chroma grays at the seed hue.
    semantic_colors:
        success/warning/error/info role colors.
    chart_scale:
        5 data-visualization colors at fixed hue offsets from the seed.
    """

    name: str
    description: str
    base_scale: Tuple[ColorShade, ...]
    tonal_scale: Tuple[ColorShade, ...]
    neutral_scale: Tuple[ColorShade, ...]
    semantic_colors: SemanticColors
    chart_scale: Tuple[ColorShade, ...]
    is_fallback: bool = field(default=False, compare=False)

    def shades(self) -> Iterator[ColorShade]:
        """Iterate every shade: base, brand, neutral, then chart."""
        yield from self.base_scale
        yield from self.tonal_scale
        yield from self.neutral_scale
        yield from self.chart_scale

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping of the palette."""

        def shade_dict(shade: ColorShade) -> Dict[str, Any]:
            return {
                "scale": shade.scale_id,
                "color": shade.serialized,
                "l": shade.color.lightness,
                "c": shade.color.chroma,
                "h": shade.color.hue,
                "foreground": shade.foreground_serialized,
            }

        return {
            "name": self.name,
            "description": self.description,
            "baseScale": [shade_dict(s) for s in self.base_scale],
            "tonalScale": [shade_dict(s) for s in self.tonal_scale],
            "neutralScale": [shade_dict(s) for s in self.neutral_scale],
            "semanticColors": {
                role: {"color": cs.serialized, "foreground": cs.foreground_serialized}
                for role, cs in self.semantic_colors.items()
            },
            "chartScale": [shade_dict(s) for s in self.chart_scale],
        }


def _empty_shade(scale_id: str) -> ColorShade:
    zero = PerceptualColor.black()
    return ColorShade(scale_id=scale_id, color=zero, serialized="", foreground=zero)


def fallback_palette(reason: str) -> Palette:
    """Complete, well-formed palette with zeroed shades."""
    zero = PerceptualColor.black()
    empty_set = SemanticColorSet(color=zero, foreground=zero)
    return Palette(
        name=FALLBACK_NAME,
        description=f"Failed to generate: {reason}",
        base_scale=tuple(_empty_shade(f"base-{s}") for s in STOPS),
        tonal_scale=tuple(_empty_shade(f"brand-{s}") for s in STOPS),
        neutral_scale=tuple(_empty_shade(f"neutral-{s}") for s in STOPS),
        semantic_colors=SemanticColors(
            success=empty_set, warning=empty_set, error=empty_set, info=empty_set
        ),
        chart_scale=tuple(_empty_shade(f"chart-{i + 1}") for i in range(len(CHART_HUE_OFFSETS))),
        is_fallback=True,
    )
