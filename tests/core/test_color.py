"""Color 値型のテスト。"""

from __future__ import annotations

from svgfig.core.color import BLACK, Color
from svgfig.export.svg import format_color


def test_default_is_black() -> None:
    assert Color() == Color(0, 0, 0)
    assert BLACK.as_tuple() == (0, 0, 0)
    assert format_color(Color()) == "#000000"


def test_format_color_uses_two_lowercase_hex_digits_per_channel() -> None:
    assert format_color(Color(255, 0, 0)) == "#ff0000"
    assert format_color(Color(1, 2, 171)) == "#0102ab"


def test_channels_are_clamped_to_8bit() -> None:
    c = Color(300, -5, 128)
    assert c.as_tuple() == (255, 0, 128)


def test_from_rgb01() -> None:
    assert Color.from_rgb01((1.0, 0.0, 0.5)).as_tuple() == (255, 0, 128)
    assert Color.from_rgb01((2.0, -1.0, 0.0)).as_tuple() == (255, 0, 0)


def test_color_is_hashable_value() -> None:
    assert len({Color(1, 2, 3), Color(1, 2, 3)}) == 1
