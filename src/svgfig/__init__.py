# どこで: `src/svgfig/__init__.py`。
# 何を: ルート `svgfig` パッケージとして図形モデルとレンダラを再エクスポートする。
# なぜ: ユーザーコードから `from svgfig import Rect, Svg, render_svg` のように簡潔に使えるようにするため。

from __future__ import annotations

from svgfig.core.attr import Attr
from svgfig.core.color import BLACK, Color
from svgfig.core.fig import (
    Circle,
    Ellipse,
    Fig,
    Line,
    Multiple,
    Rect,
    Shared,
    Styled,
    Text,
    Transformed,
)
from svgfig.core.svg import Svg
from svgfig.core.trans import Rotate, Scale, Trans, Translate
from svgfig.export.svg import export_svg, render_fig, render_svg, write_fig, write_svg

__all__ = [
    "Attr",
    "BLACK",
    "Circle",
    "Color",
    "Ellipse",
    "Fig",
    "Line",
    "Multiple",
    "Rect",
    "Rotate",
    "Scale",
    "Shared",
    "Styled",
    "Svg",
    "Text",
    "Trans",
    "Transformed",
    "Translate",
    "export_svg",
    "render_fig",
    "render_svg",
    "write_fig",
    "write_svg",
]
