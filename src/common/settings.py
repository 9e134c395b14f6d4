"""
どこで: `common.settings`
何を: palettekit の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_choice, env_int

GAMUT_SPACES = ("srgb", "display-p3")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class _Settings:
    # ガマットマッピング対象
    GAMUT_SPACE: str = "srgb"

    # PaletteCache の既定上限（0 で無効）
    CACHE_MAXSIZE: int = 32

    # CLI ランナーのログレベル
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 列挙は `env_choice`、int は `env_int` を使用。
    - 不正値は既定値へフォールバック、CACHE_MAXSIZE は 0 に下限丸め。
    """
    _settings.GAMUT_SPACE = env_choice("PALETTEKIT_GAMUT_SPACE", "srgb", GAMUT_SPACES)
    _settings.CACHE_MAXSIZE = env_int("PALETTEKIT_CACHE_MAXSIZE", 32, min_value=0) or 0
    _settings.LOG_LEVEL = env_choice("PALETTEKIT_LOG_LEVEL", "info", LOG_LEVELS).upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "GAMUT_SPACES", "LOG_LEVELS", "_Settings"]
