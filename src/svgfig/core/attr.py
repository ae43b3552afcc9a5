"""
どこで: `src/svgfig/core/attr.py`。
何を: 要素ごとのスタイル属性（fill/stroke/線幅/不透明度/フォント）を保持する Attr を定義する。
なぜ: 未設定の属性を出力から省きつつ、ビルダー呼び出しで属性を積み上げられるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from svgfig.core.color import Color


@dataclass(frozen=True, slots=True)
class Attr:
    """スタイル属性の集合。

    Parameters
    ----------
    fill : Color or None
        塗り色。
    stroke : Color or None
        線色。
    stroke_width : float or None
        線幅。
    opacity : float or None
        不透明度。
    font_family : str or None
        フォント名。

    Notes
    -----
    None は「未設定」を表し、シリアライズ時に出力しない。
    `with_*` はレシーバを変更せず、新しい Attr を返す（同じフィールドは後勝ち）。
    フィールド間の整合性は検証しない。
    """

    fill: Color | None = None
    stroke: Color | None = None
    stroke_width: float | None = None
    opacity: float | None = None
    font_family: str | None = None

    def with_fill(self, color: Color) -> "Attr":
        return replace(self, fill=color)

    def with_stroke(self, color: Color) -> "Attr":
        return replace(self, stroke=color)

    def with_stroke_width(self, width: float) -> "Attr":
        return replace(self, stroke_width=width)

    def with_opacity(self, opacity: float) -> "Attr":
        return replace(self, opacity=opacity)

    def with_font_family(self, font_family: str) -> "Attr":
        return replace(self, font_family=font_family)

    def is_empty(self) -> bool:
        """どのフィールドも設定されていなければ True を返す。"""

        return (
            self.fill is None
            and self.stroke is None
            and self.stroke_width is None
            and self.opacity is None
            and self.font_family is None
        )


__all__ = ["Attr"]
