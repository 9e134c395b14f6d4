from __future__ import annotations

import logging
from typing import Iterator

import pytest

from common import settings
from common.logging import resolve_level, setup_default_logging


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    for name in ("PALETTEKIT_GAMUT_SPACE", "PALETTEKIT_CACHE_MAXSIZE", "PALETTEKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings.reload_from_env()
    s = settings.get()
    assert s.GAMUT_SPACE == "srgb"
    assert s.CACHE_MAXSIZE == 32
    assert s.LOG_LEVEL == "INFO"


def test_reload_from_env(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("PALETTEKIT_GAMUT_SPACE", "display-p3")
    clean_env.setenv("PALETTEKIT_CACHE_MAXSIZE", "-5")
    clean_env.setenv("PALETTEKIT_LOG_LEVEL", "debug")
    settings.reload_from_env()
    s = settings.get()
    assert s.GAMUT_SPACE == "display-p3"
    assert s.CACHE_MAXSIZE == 0
    assert s.LOG_LEVEL == "DEBUG"


def test_invalid_values_fall_back(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("PALETTEKIT_GAMUT_SPACE", "cmyk")
    clean_env.setenv("PALETTEKIT_LOG_LEVEL", "loud")
    settings.reload_from_env()
    assert settings.get().GAMUT_SPACE == "srgb"
    assert settings.get().LOG_LEVEL == "INFO"


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("nope") == logging.INFO
    assert resolve_level(logging.WARNING) == logging.WARNING


def test_setup_default_logging_respects_existing_handlers() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    old_level = root.level
    try:
        setup_default_logging("WARNING")
        if before:
            assert root.handlers == before
        assert root.level == logging.WARNING
    finally:
        root.setLevel(old_level)
