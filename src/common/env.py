"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: settings 以外で `os.getenv` + 例外/境界ガードを書かずに済ませるため。
"""

from __future__ import annotations

import os
from typing import Optional, Sequence


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値（`None` を渡すと `None` を許容）。
    min_value : Optional[int]
        下限（指定時、結果が下回れば下限に丸める）。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_float(name: str, default: float) -> float:
    """浮動小数環境変数を取得（存在しない/不正値/非有限は既定値）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = float(raw.strip())
    except ValueError:
        return default
    if val != val or val in (float("inf"), float("-inf")):
        return default
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false, yes/no, on/off を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    if s in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "f", "no", "n", "off"}:
        return False
    return bool(default)


def env_choice(name: str, default: str, choices: Sequence[str]) -> str:
    """列挙値の環境変数を取得（小文字化して照合、候補外は既定値）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    return s if s in choices else default


__all__ = ["env_int", "env_float", "env_bool", "env_choice"]
