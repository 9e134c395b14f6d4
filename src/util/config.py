from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/` 配下から呼ばれることを想定し、上位に `.git` や `pyproject.toml`、`configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/config.py -> <repo>
    return cur.parent.parent


def load_config(path: Optional[Path | str] = None, root: Optional[Path] = None) -> Dict[str, Any]:
    """CLI 用の構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `<root>/configs/default.yaml`（ベース）
    2) 引数 `path` のファイル（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    - 想定キー: `seed`, `format`, `gamut_space`。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    if path is not None:
        user_path = Path(path)
        if user_path.exists():
            base.update(_safe_load_yaml(user_path))

    return base
