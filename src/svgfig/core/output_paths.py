# どこで: `src/svgfig/core/output_paths.py`。
# 何を: 名前と run_id から出力ファイルの保存先パスを決める。
# なぜ: `output/{kind}/` 配下に出力を集め、同じ図の版違いを run_id で並べて置けるようにするため。

from __future__ import annotations

import re
from pathlib import Path

from svgfig.core.runtime_config import output_root_dir


def _sanitize(text: str) -> str:
    """text をファイル名の一部として使える形に正規化して返す。"""

    return re.sub(r"[^A-Za-z0-9._-]+", "_", str(text))


def _run_id_suffix(run_id: str | None) -> str:
    """run_id の接尾辞（例: `_v1`）を返す。未指定なら空文字を返す。"""

    if run_id is None:
        return ""
    s = str(run_id).strip()
    if not s:
        return ""
    return f"_{_sanitize(s)}"


def output_path_for(
    name: str,
    *,
    kind: str = "svg",
    ext: str = "svg",
    run_id: str | None = None,
) -> Path:
    """出力ファイルの保存先パス `output_root/{kind}/{name}[_run_id].{ext}` を返す。

    Raises
    ------
    ValueError
        ext または name が空の場合。
    """

    ext_norm = str(ext).lstrip(".").strip()
    if not ext_norm:
        raise ValueError("ext は空でない必要がある")

    stem = _sanitize(str(name).strip())
    if not stem:
        raise ValueError("name は空でない必要がある")

    filename = f"{stem}{_run_id_suffix(run_id)}.{ext_norm}"
    return output_root_dir() / str(kind) / filename


__all__ = ["output_path_for"]
