"""
どこで: `src/svgfig/core/fig.py`。
何を: 図形ツリー Fig（基本図形・スタイル/変換ラッパ・集約・共有ノード）を定義する。
なぜ: 図の構築を不変な値の合成として表現し、レンダラが再帰下降だけで出力できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from types import NotImplementedType

from svgfig.core.attr import Attr
from svgfig.core.trans import Trans


class Fig:
    """図形ツリーの基底クラス。

    Notes
    -----
    具象ノードはすべて frozen dataclass とし、生成後に変更しない。
    ラップ演算（`styled` / `transformed` / `shared`）は self を子に持つ
    新しいノードを返すだけで、既存ノードには触れない。
    """

    __slots__ = ()

    def styled(self, attr: Attr) -> "Fig":
        """`attr` のスタイルを適用した Styled ノードを返す。"""

        return Styled(attr, self)

    def transformed(self, trans: Trans) -> "Fig":
        """`trans` の座標変換を適用した Transformed ノードを返す。"""

        return Transformed(trans, self)

    def shared(self) -> "Fig":
        """複数の親から参照できる Shared ノードへ変換する。"""

        return Shared(self)

    @staticmethod
    def _concat(*figs: "Fig") -> "Fig":
        """Fig 列を Multiple としてまとめる（Multiple は展開する）。"""
        children: list[Fig] = []
        for f in figs:
            if isinstance(f, Multiple):
                children.extend(f.children)
            else:
                children.append(f)
        return Multiple(children)

    def __add__(self, other: object) -> "Fig | NotImplementedType":
        """`a + b` を Multiple（a の上に b を描く）として表現する。"""
        if not isinstance(other, Fig):
            return NotImplemented
        return Fig._concat(self, other)

    def __radd__(self, other: object) -> "Fig | NotImplementedType":
        """`sum([...])` のために `0 + Fig` を許可する。"""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        if not isinstance(other, Fig):
            return NotImplemented
        return Fig._concat(other, self)


def _require_fig(value: object, *, where: str) -> None:
    if not isinstance(value, Fig):
        raise TypeError(f"{where} の子は Fig である必要がある: got={type(value)!r}")


@dataclass(frozen=True, slots=True)
class Rect(Fig):
    """矩形。左上 `(x, y)` と幅・高さ。"""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Circle(Fig):
    """円。中心 `(x, y)` と半径 `r`。"""

    x: float
    y: float
    r: float


@dataclass(frozen=True, slots=True)
class Ellipse(Fig):
    """楕円。中心 `(x, y)` と半径 `(rx, ry)`。"""

    x: float
    y: float
    rx: float
    ry: float


@dataclass(frozen=True, slots=True)
class Line(Fig):
    """線分 `(x1, y1)` -> `(x2, y2)`。"""

    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True, slots=True)
class Text(Fig):
    """位置 `(x, y)` に置くテキスト。"""

    x: float
    y: float
    text: str


@dataclass(frozen=True, slots=True)
class Styled(Fig):
    """子ノードにスタイル属性を適用するラッパ。"""

    attr: Attr
    child: Fig

    def __post_init__(self) -> None:
        _require_fig(self.child, where="Styled")


@dataclass(frozen=True, slots=True)
class Transformed(Fig):
    """子ノードに座標変換を適用するラッパ。"""

    trans: Trans
    child: Fig

    def __post_init__(self) -> None:
        _require_fig(self.child, where="Transformed")


@dataclass(frozen=True, slots=True)
class Multiple(Fig):
    """複数ノードの集約。

    Parameters
    ----------
    children : Sequence[Fig]
        子ノード列。タプルに固定して保持する。

    Notes
    -----
    出力は格納順の連結であり、後の子が前の子の上に描かれる。
    """

    children: tuple[Fig, ...]

    def __post_init__(self) -> None:
        if isinstance(self.children, Fig):
            raise TypeError("Multiple には Fig の列を渡す必要がある")
        children = tuple(self.children)
        for child in children:
            _require_fig(child, where="Multiple")
        object.__setattr__(self, "children", children)

    def __len__(self) -> int:
        return len(self.children)


@dataclass(frozen=True, slots=True)
class Shared(Fig):
    """不変な子ノードへの共有ハンドル。

    Notes
    -----
    同じ Shared インスタンスを複数の親から参照しても子は複製されず、
    最後の参照が消えた時点で解放される。出力時は出現箇所ごとに子を展開する。
    """

    child: Fig

    def __post_init__(self) -> None:
        _require_fig(self.child, where="Shared")
        if isinstance(self.child, Shared):
            raise TypeError("Shared を Shared で包むことはできない（shared() を使う）")

    def shared(self) -> "Fig":
        return self


__all__ = [
    "Circle",
    "Ellipse",
    "Fig",
    "Line",
    "Multiple",
    "Rect",
    "Shared",
    "Styled",
    "Text",
    "Transformed",
]
