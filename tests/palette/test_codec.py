from __future__ import annotations

import math
import re

import pytest

from palettekit.codec import (
    ParseError,
    RangeViolation,
    clamp,
    format_oklch,
    normalize_input_hue,
    parse_oklch,
    parse_seed,
    validate_oklch,
)
from palettekit.color_types import PerceptualColor


def test_parse_percent_lightness() -> None:
    c = parse_oklch("oklch(42% 0.242 303.89)")
    assert c.lightness == pytest.approx(42.0)
    assert c.chroma == pytest.approx(0.242)
    assert c.hue == pytest.approx(303.89)


def test_parse_bare_lightness_is_percent_scale() -> None:
    assert parse_oklch("oklch(50 0.1 200)") == parse_oklch("oklch(50% 0.1 200)")
    assert parse_oklch("oklch(0.5 0.1 200)").lightness == pytest.approx(0.5)


def test_parse_tolerates_whitespace_and_case() -> None:
    c = parse_oklch("  OKLCH(  60%   0.18   240 )  ")
    assert c == PerceptualColor(60.0, 0.18, 240.0)


@pytest.mark.parametrize(
    "text",
    [
        "garbage",
        "",
        "oklch(50% 0.1)",
        "oklch(50% 0.1 200 10)",
        "oklch 50% 0.1 200",
        "oklch(50% 0.1 200",
        "oklch(abc 0.1 200)",
        "oklch(1.2.3 0.1 200)",
        "oklch(-5% 0.1 200)",
        "rgb(1 2 3)",
    ],
)
def test_parse_invalid_raises(text: str) -> None:
    with pytest.raises(ParseError):
        parse_oklch(text)


def test_parse_non_string_raises() -> None:
    with pytest.raises(ParseError):
        parse_oklch(None)  # type: ignore[arg-type]


def test_parse_error_is_value_error() -> None:
    assert issubclass(ParseError, ValueError)
    assert issubclass(RangeViolation, ValueError)


def test_format_fixed_precision() -> None:
    assert format_oklch(49.6, 0.272, 303.89) == "oklch(49.6% 0.272 303.89)"
    text = format_oklch(42.0, 0.242, 303.89)
    assert re.fullmatch(r"oklch\(\d{1,3}\.\d%\s+\d\.\d{3}\s+\d{1,3}\.\d{2}\)", text)


def test_format_clamps_and_wraps() -> None:
    assert format_oklch(120.0, 0.9, 360.0) == "oklch(100.0% 0.500 0.00)"
    assert format_oklch(-5.0, -0.1, -30.0) == "oklch(0.0% 0.000 330.00)"
    assert format_oklch(50.0, 0.1, 725.0) == "oklch(50.0% 0.100 5.00)"


@pytest.mark.parametrize("hue", [359.996, -1e-15, 720.004])
def test_format_hue_rounding_never_prints_360(hue: float) -> None:
    assert format_oklch(50.0, 0.1, hue) == "oklch(50.0% 0.100 0.00)"


def test_validate_ranges() -> None:
    assert validate_oklch(PerceptualColor(0.0, 0.0, 0.0))
    assert validate_oklch(PerceptualColor(100.0, 0.5, 360.0))
    assert not validate_oklch(PerceptualColor(100.1, 0.1, 10.0))
    assert not validate_oklch(PerceptualColor(50.0, 0.51, 10.0))
    assert not validate_oklch(PerceptualColor(50.0, 0.1, 360.5))
    assert not validate_oklch(PerceptualColor(50.0, -0.01, 10.0))
    assert not validate_oklch(PerceptualColor(math.nan, 0.1, 10.0))


def test_parse_seed_rejects_out_of_range() -> None:
    with pytest.raises(RangeViolation):
        parse_seed("oklch(50% 0.6 200)")
    with pytest.raises(RangeViolation):
        parse_seed("oklch(150% 0.1 200)")
    with pytest.raises(RangeViolation):
        parse_seed("oklch(50% 0.1 400)")
    assert parse_seed("oklch(50% 0.1 360)").hue == 360.0


def test_normalize_input_hue_keeps_explicit_360() -> None:
    assert normalize_input_hue(370.0) == pytest.approx(10.0)
    assert normalize_input_hue(-30.0) == pytest.approx(330.0)
    assert normalize_input_hue(360.0) == 360.0
    assert normalize_input_hue(720.0) == 0.0


def test_clamp() -> None:
    assert clamp(200, 0, 100) == 100
    assert clamp(-10, 0, 100) == 0
    assert clamp(50, 0, 100) == 50
