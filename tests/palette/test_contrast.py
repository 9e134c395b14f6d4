from __future__ import annotations

import pytest

from palettekit.color_types import PerceptualColor
from palettekit.contrast import (
    AA_NORMAL,
    DARK_FOREGROUND_L,
    LIGHT_FOREGROUND_L,
    contrast_ratio,
    foreground_candidates,
    foreground_contrast,
    pick_foreground,
)
from palettekit.engine import DefaultColorEngine


def test_contrast_ratio_black_white() -> None:
    assert contrast_ratio(1.0, 0.0) == pytest.approx(21.0)
    assert contrast_ratio(0.0, 1.0) == pytest.approx(21.0)
    assert contrast_ratio(0.3, 0.3) == pytest.approx(1.0)


def test_white_background_gets_dark_text(engine: DefaultColorEngine) -> None:
    fg = pick_foreground(PerceptualColor(100.0, 0.0, 0.0), AA_NORMAL, engine)
    assert fg.lightness == DARK_FOREGROUND_L


def test_black_background_gets_light_text(engine: DefaultColorEngine) -> None:
    fg = pick_foreground(PerceptualColor(0.0, 0.0, 0.0), AA_NORMAL, engine)
    assert fg.lightness == LIGHT_FOREGROUND_L


def test_foreground_tinted_with_background_hue(engine: DefaultColorEngine) -> None:
    bg = PerceptualColor(30.0, 0.1, 212.5)
    assert pick_foreground(bg, AA_NORMAL, engine).hue == 212.5


@pytest.mark.parametrize(
    "bg",
    [
        PerceptualColor(95.0, 0.02, 300.0),
        PerceptualColor(62.0, 0.12, 30.0),
        PerceptualColor(55.0, 0.0, 0.0),
        PerceptualColor(48.0, 0.2, 260.0),
        PerceptualColor(10.0, 0.03, 120.0),
    ],
)
def test_pick_foreground_never_picks_worse(bg: PerceptualColor, engine: DefaultColorEngine) -> None:
    light, dark = foreground_candidates(bg)
    chosen = pick_foreground(bg, AA_NORMAL, engine)
    other = dark if chosen == light else light
    assert foreground_contrast(bg, chosen, engine) >= foreground_contrast(bg, other, engine)


def test_unreachable_target_still_returns_best(engine: DefaultColorEngine) -> None:
    bg = PerceptualColor(55.0, 0.0, 0.0)
    light, dark = foreground_candidates(bg)
    chosen = pick_foreground(bg, 100.0, engine)
    assert chosen in (light, dark)
    best = max(foreground_contrast(bg, light, engine), foreground_contrast(bg, dark, engine))
    assert foreground_contrast(bg, chosen, engine) == best
