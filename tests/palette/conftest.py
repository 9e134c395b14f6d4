"""palettekit 用フィクスチャ。"""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from common import settings
from palettekit.engine import DefaultColorEngine

PURPLE_SEED = "oklch(49.6% 0.272 303.89)"
BLUE_SEED = "oklch(60% 0.18 240)"


@pytest.fixture()
def engine() -> DefaultColorEngine:
    return DefaultColorEngine()


@pytest.fixture()
def purple_seed() -> str:
    return PURPLE_SEED


@pytest.fixture()
def blue_seed() -> str:
    return BLUE_SEED


@pytest.fixture()
def set_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str, str], None]]:
    """環境変数を設定して settings を再読込する。終了時に元へ戻す。"""

    def _set(name: str, value: str) -> None:
        monkeypatch.setenv(name, value)
        settings.reload_from_env()

    yield _set
    monkeypatch.undo()
    settings.reload_from_env()
