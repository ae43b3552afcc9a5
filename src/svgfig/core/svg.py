"""
どこで: `src/svgfig/core/svg.py`。
何を: トップレベル図形列とビューポート寸法を束ねるルート Svg を定義する。
なぜ: 1 回の出力単位をレンダラへ渡す不変な値として固定するため。
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral

from svgfig.core.fig import Fig


def _as_dimension(value: object, *, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{key} は整数である必要がある: got={value!r}")
    iv = int(value)
    if iv < 0:
        raise ValueError(f"{key} は 0 以上である必要がある: got={iv}")
    return iv


@dataclass(frozen=True, slots=True)
class Svg:
    """SVG 画像のルート。

    Parameters
    ----------
    figures : Iterable[Fig]
        トップレベル図形列。タプルに固定し、描画順を保つ。
    width : int
        ビューポート幅。
    height : int
        ビューポート高さ。

    Raises
    ------
    TypeError
        figures に Fig 以外が含まれる、または寸法が整数でない場合。
    ValueError
        寸法が負の場合。
    """

    figures: tuple[Fig, ...]
    width: int
    height: int

    def __post_init__(self) -> None:
        if isinstance(self.figures, Fig):
            raise TypeError("Svg には Fig の列を渡す必要がある")
        figs = tuple(self.figures)
        for f in figs:
            if not isinstance(f, Fig):
                raise TypeError(f"Svg の要素は Fig である必要がある: got={type(f)!r}")
        object.__setattr__(self, "figures", figs)
        object.__setattr__(self, "width", _as_dimension(self.width, key="width"))
        object.__setattr__(self, "height", _as_dimension(self.height, key="height"))


__all__ = ["Svg"]
