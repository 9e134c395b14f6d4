"""Command line runner: ``python -m palettekit "oklch(60% 0.18 240)"``.

Prints the generated palette as JSON, or as a flat ``{shade id: color}``
map for the simple export formats. Exit status 2 signals that the seed was
rejected and the fallback palette was printed.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional

from common import settings
from common.logging import setup_default_logging
from util.config import load_config

from .api import build_palette
from .ui_helpers import ExportFormat, export_palette

OUTPUT_FORMATS = ("json",) + tuple(fmt.value for fmt in ExportFormat)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="palettekit",
        description="Generate an accessible color system from one OKLCH seed color.",
    )
    parser.add_argument(
        "seed",
        nargs="?",
        default=None,
        help='Seed color, e.g. "oklch(49.6%% 0.272 303.89)". Defaults to the config value.',
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--gamut",
        choices=settings.GAMUT_SPACES,
        default=None,
        help="Gamut used when mapping generated shades.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="YAML file overriding configs/default.yaml.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: PALETTEKIT_LOG_LEVEL or INFO).",
    )
    return parser.parse_args(argv)


def _pick(cli_value: Optional[str], cfg: dict[str, Any], key: str, default: str) -> str:
    if cli_value is not None:
        return cli_value
    value = cfg.get(key)
    return str(value) if value is not None else default


def main(argv: list[str]) -> int:
    args = _parse_args(argv)
    conf = settings.get()
    setup_default_logging(args.log_level or conf.LOG_LEVEL)

    cfg = load_config(args.config)
    seed = _pick(args.seed, cfg, "seed", "")
    fmt = _pick(args.format, cfg, "format", "json")
    space = _pick(args.gamut, cfg, "gamut_space", conf.GAMUT_SPACE)
    if fmt not in OUTPUT_FORMATS:
        sys.stderr.write(f"unknown output format: {fmt}\n")
        return 1

    palette = build_palette(seed, space)
    if fmt == "json":
        payload: Any = palette.to_dict()
    else:
        payload = export_palette(palette, fmt)
    print(json.dumps(payload, ensure_ascii=False, indent=2))

    if palette.is_fallback:
        sys.stderr.write(f"{palette.description}\n")
        return 2
    return 0


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(_console_main())
