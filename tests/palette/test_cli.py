from __future__ import annotations

import json
from pathlib import Path

import pytest

from palettekit.__main__ import main


def test_cli_json(capsys: pytest.CaptureFixture[str], purple_seed: str) -> None:
    assert main([purple_seed]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Generated Palette"
    assert data["tonalScale"][5]["color"] == "oklch(49.6% 0.272 303.89)"


def test_cli_hex_format(capsys: pytest.CaptureFixture[str], blue_seed: str) -> None:
    assert main([blue_seed, "--format", "hex", "--gamut", "display-p3"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["base-50"] == "#ffffff"
    assert len(data) == 42


def test_cli_invalid_seed_exits_2(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["garbage"]) == 2
    captured = capsys.readouterr()
    assert json.loads(captured.out)["name"] == "Invalid Palette"
    assert "Failed to generate" in captured.err


def test_cli_seed_from_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "palette.yaml"
    cfg.write_text('seed: "oklch(60% 0.18 240)"\nformat: oklch\n', encoding="utf-8")
    assert main(["--config", str(cfg)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["brand-500"] == "oklch(60.0% 0.180 240.00)"


def test_cli_rejects_unknown_format_in_config(tmp_path: Path) -> None:
    cfg = tmp_path / "palette.yaml"
    cfg.write_text("format: css\n", encoding="utf-8")
    assert main(["oklch(60% 0.18 240)", "--config", str(cfg)]) == 1
