"""
どこで: `src/svgfig/export/svg.py`。
何を: Svg/Fig を SVG マークアップ文字列へ深さ優先で書き出すレンダラと、ファイル保存関数を提供する。
なぜ: 同じ図から常に同じ文字列が得られる、決定的な出力を 1 か所に集約するため。
"""

from __future__ import annotations

import io
import logging
from decimal import Decimal
from numbers import Integral, Real
from pathlib import Path
from typing import Callable, Protocol

import numpy as np

from svgfig.core.attr import Attr
from svgfig.core.color import Color
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
from svgfig.core.output_paths import output_path_for
from svgfig.core.runtime_config import runtime_config
from svgfig.core.svg import Svg
from svgfig.core.trans import Rotate, Scale, Trans, Translate

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"
_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
_ESCAPES = {"<": "&lt;", ">": "&gt;", "&": "&amp;"}


class TextSink(Protocol):
    """`write(str)` を持つ出力先。"""

    def write(self, s: str, /) -> object: ...


_Write = Callable[[str], object]


def format_number(value: float) -> str:
    """数値を SVG 出力向けの文字列へ変換して返す。

    Parameters
    ----------
    value : float
        整数または実数。NaN/inf も受け付ける。

    Returns
    -------
    str
        整数は 10 進整数表記。実数は往復可能な最短の固定小数表記で、
        末尾の `.0` は付けない（`10.0` -> `10`）。NaN/inf は `nan`/`inf`/`-inf`。
        numpy の浮動小数スカラーは自身の精度で、Decimal は固定小数表記で出力する。

    Raises
    ------
    TypeError
        数値でない値が渡された場合。
    """

    if isinstance(value, Integral):
        return str(int(value))
    if isinstance(value, np.floating):
        # float32 などは元の精度のまま最短表記にする。
        return np.format_float_positional(value, trim="-")
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    if not isinstance(value, Real):
        raise TypeError(f"数値として出力できない型: {type(value)!r}")
    return np.format_float_positional(float(value), trim="-")


def format_color(color: Color) -> str:
    """Color を `#rrggbb` に変換して返す。"""

    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


def format_style(attr: Attr) -> str:
    """Attr を style 属性値（`property:value;` の連結）に変換して返す。

    Notes
    -----
    出力順は fill, stroke, stroke-width, opacity, font-family で固定とし、
    未設定のフィールドは出力しない。何も設定されていなければ空文字を返す。
    """

    parts: list[str] = []
    if attr.fill is not None:
        parts.append(f"fill:{format_color(attr.fill)};")
    if attr.stroke is not None:
        parts.append(f"stroke:{format_color(attr.stroke)};")
    if attr.stroke_width is not None:
        parts.append(f"stroke-width:{format_number(attr.stroke_width)};")
    if attr.opacity is not None:
        parts.append(f"opacity:{format_number(attr.opacity)};")
    if attr.font_family is not None:
        parts.append(f"font-family:{attr.font_family};")
    return "".join(parts)


def _format_transform_op(op: Translate | Rotate | Scale) -> str:
    if isinstance(op, Translate):
        return f"translate({format_number(op.dx)}, {format_number(op.dy)}) "
    if isinstance(op, Rotate):
        return f"rotate({format_number(op.degrees)}) "
    if isinstance(op, Scale):
        if op.is_uniform:
            return f"scale({format_number(op.sx)}) "
        return f"scale({format_number(op.sx)}, {format_number(op.sy)}) "
    raise TypeError(f"出力できない変換型: {type(op)!r}")


def format_transform(trans: Trans) -> str:
    """Trans を transform 属性値に変換して返す。

    Notes
    -----
    SVG の transform は左端のトークンが最後に点へ適用されるため、
    追加順の逆順で出力する。各トークンの後ろには空白を 1 つ付ける。
    """

    return "".join(_format_transform_op(op) for op in reversed(trans.ops))


def escape_text(text: str) -> str:
    """`<` `>` `&` だけを実体参照に置き換えて返す。"""

    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _write_fig(fig: Fig, write: _Write) -> None:
    """Fig を深さ優先で書き出す。

    Notes
    -----
    入れ子の深さに依らないよう、再帰ではなく明示スタックで走査する。
    スタックには未処理の Fig と、保留中の閉じタグ文字列を積む。
    """
    stack: list[Fig | str] = [fig]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            write(item)
            continue
        if isinstance(item, Styled):
            write(f'<g style="{format_style(item.attr)}">\n')
            stack.append("</g>\n")
            stack.append(item.child)
            continue
        if isinstance(item, Transformed):
            write(f'<g transform="{format_transform(item.trans)}">\n')
            stack.append("</g>\n")
            stack.append(item.child)
            continue
        if isinstance(item, Multiple):
            stack.extend(reversed(item.children))
            continue
        if isinstance(item, Shared):
            # 共有ノードは出現箇所ごとに展開する。
            stack.append(item.child)
            continue
        _write_leaf(item, write)


def _write_leaf(fig: Fig, write: _Write) -> None:
    if isinstance(fig, Rect):
        write(
            f'<rect x="{format_number(fig.x)}" y="{format_number(fig.y)}" '
            f'width="{format_number(fig.width)}" height="{format_number(fig.height)}"/>\n'
        )
        return
    if isinstance(fig, Line):
        write(
            f'<line x1="{format_number(fig.x1)}" y1="{format_number(fig.y1)}" '
            f'x2="{format_number(fig.x2)}" y2="{format_number(fig.y2)}"/>\n'
        )
        return
    if isinstance(fig, Circle):
        write(
            f'<circle x="{format_number(fig.x)}" y="{format_number(fig.y)}" '
            f'r="{format_number(fig.r)}"/>\n'
        )
        return
    if isinstance(fig, Ellipse):
        write(
            f'<ellipse x="{format_number(fig.x)}" y="{format_number(fig.y)}" '
            f'rx="{format_number(fig.rx)}" ry="{format_number(fig.ry)}"/>\n'
        )
        return
    if isinstance(fig, Text):
        write(
            f'<text x="{format_number(fig.x)}" y="{format_number(fig.y)}">'
            f"{escape_text(fig.text)}</text>\n"
        )
        return
    raise TypeError(f"出力できない Fig 型: {type(fig)!r}")


def write_fig(fig: Fig, out: TextSink) -> None:
    """Fig のマークアップを out へ書き出す。

    Raises
    ------
    TypeError
        未対応の Fig 型が含まれる場合。

    Notes
    -----
    out.write が送出した例外はその場で走査を打ち切り、そのまま伝播する。
    """

    _write_fig(fig, out.write)


def write_svg(svg: Svg, out: TextSink) -> None:
    """Svg のマークアップ（ルート要素 + 全図形）を out へ書き出す。"""

    write = out.write
    write(
        f'<svg width="{format_number(svg.width)}" height="{format_number(svg.height)}" '
        f'xmlns="{_SVG_NS}">\n'
    )
    for fig in svg.figures:
        _write_fig(fig, write)
    write("</svg>\n")


def render_fig(fig: Fig) -> str:
    """Fig のマークアップを文字列で返す。"""

    buf = io.StringIO()
    write_fig(fig, buf)
    return buf.getvalue()


def render_svg(svg: Svg) -> str:
    """Svg のマークアップを文字列で返す。

    Parameters
    ----------
    svg : Svg
        出力対象。変更しない。

    Returns
    -------
    str
        SVG マークアップ。各要素は改行区切り。
    """

    buf = io.StringIO()
    write_svg(svg, buf)
    return buf.getvalue()


def export_svg(
    svg: Svg,
    path: str | Path | None = None,
    *,
    name: str = "figure",
    run_id: str | None = None,
) -> Path:
    """Svg を SVG ファイルとして保存する。

    Parameters
    ----------
    svg : Svg
        出力対象。
    path : str or Path or None, optional
        出力先パス。None の場合は `output_root/svg/{name}[_run_id].svg`。
    name : str, optional
        path 省略時のファイル名幹。
    run_id : str or None, optional
        path 省略時にファイル名へ付ける接尾辞。

    Returns
    -------
    Path
        保存先パス。

    Notes
    -----
    runtime config の `export.svg.xml_declaration` が true の場合、
    先頭に XML 宣言を付ける。
    """

    _path = Path(path) if path is not None else output_path_for(name, kind="svg", run_id=run_id)
    cfg = runtime_config()

    text = render_svg(svg)
    if cfg.svg_xml_declaration:
        text = _XML_DECLARATION + text

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    _logger.debug(
        "SVG を書き出しました: path=%s figures=%d size=%dx%d",
        _path,
        len(svg.figures),
        svg.width,
        svg.height,
    )
    return _path


__all__ = [
    "escape_text",
    "export_svg",
    "format_color",
    "format_number",
    "format_style",
    "format_transform",
    "render_fig",
    "render_svg",
    "write_fig",
    "write_svg",
]
