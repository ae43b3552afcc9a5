"""
どこで: `src/svgfig/core/color.py`。
何を: 8bit RGB の不変値型 Color を定義する。
なぜ: fill/stroke など複数の属性で同じ色表現を共有するため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast


def _clamp255(value: object) -> int:
    iv = int(cast(Any, value))
    return 0 if iv < 0 else 255 if iv > 255 else iv


@dataclass(frozen=True, slots=True)
class Color:
    """RGB 3 チャンネルの色。既定値は黒 (0, 0, 0)。

    Parameters
    ----------
    r, g, b : int
        各チャンネル値。`int()` 化 + 0..255 clamp して保持する。

    Notes
    -----
    チャンネル幅が 8bit である前提のため、範囲外の値はエラーにせず丸め込む。
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _clamp255(self.r))
        object.__setattr__(self, "g", _clamp255(self.g))
        object.__setattr__(self, "b", _clamp255(self.b))

    @classmethod
    def from_rgb01(cls, rgb: tuple[float, float, float]) -> "Color":
        """0..1 float の RGB から Color を生成する。"""

        r, g, b = rgb
        out: list[int] = []
        for v in (r, g, b):
            fv = float(v)
            fv = 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv
            out.append(int(round(fv * 255.0)))
        return cls(out[0], out[1], out[2])

    def as_tuple(self) -> tuple[int, int, int]:
        """`(r, g, b)` タプルを返す。"""

        return self.r, self.g, self.b


BLACK = Color()

__all__ = ["BLACK", "Color"]
