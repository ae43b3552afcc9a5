"""Fig ツリーとラップ演算（styled/transformed/shared/+）のテスト。"""

from __future__ import annotations

import math

import pytest

from svgfig.core.attr import Attr
from svgfig.core.color import Color
from svgfig.core.fig import (
    Circle,
    Fig,
    Line,
    Multiple,
    Rect,
    Shared,
    Styled,
    Text,
    Transformed,
)
from svgfig.core.trans import Trans


def test_styled_wraps_self() -> None:
    rect = Rect(10, 10, 200, 100)
    attr = Attr(fill=Color(255, 0, 0))
    fig = rect.styled(attr)
    assert isinstance(fig, Styled)
    assert fig.attr == attr
    assert fig.child is rect


def test_transformed_wraps_self() -> None:
    line = Line(0, 0, 1, 1)
    trans = Trans().rotate(45)
    fig = line.transformed(trans)
    assert isinstance(fig, Transformed)
    assert fig.trans == trans
    assert fig.child is line


def test_shared_is_idempotent() -> None:
    once = Circle(0, 0, 5).shared()
    twice = once.shared()
    assert isinstance(once, Shared)
    assert twice is once
    assert not isinstance(twice.child, Shared)


def test_shared_rejects_nested_handle() -> None:
    with pytest.raises(TypeError):
        Shared(Shared(Circle(0, 0, 1)))


def test_shared_payload_is_referenced_not_copied() -> None:
    payload = Line(0, 0, 10, 0)
    shared = payload.shared()
    fig = Multiple([shared, shared.transformed(Trans().translate(10, 0))])
    assert fig.children[0] is shared
    assert fig.children[1].child is shared
    assert shared.child is payload


def test_wrap_does_not_mutate_original() -> None:
    rect = Rect(0, 0, 1, 1)
    _ = rect.styled(Attr().with_opacity(0.5))
    assert rect == Rect(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        rect.x = 5  # type: ignore[misc]


def test_multiple_stores_tuple_in_order() -> None:
    a, b, c = Rect(0, 0, 1, 1), Circle(1, 1, 1), Text(0, 0, "c")
    fig = Multiple([a, b, c])
    assert fig.children == (a, b, c)
    assert len(fig) == 3


def test_multiple_rejects_non_fig() -> None:
    with pytest.raises(TypeError):
        Multiple([Rect(0, 0, 1, 1), "rect"])  # type: ignore[list-item]
    with pytest.raises(TypeError):
        Multiple(Rect(0, 0, 1, 1))  # type: ignore[arg-type]


def test_wrappers_reject_non_fig_child() -> None:
    with pytest.raises(TypeError):
        Styled(Attr(), "x")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Transformed(Trans(), None)  # type: ignore[arg-type]


def test_add_creates_multiple_and_flattens() -> None:
    a, b, c = Line(0, 0, 1, 0), Line(1, 0, 2, 0), Line(2, 0, 3, 0)
    assert (a + b).children == (a, b)
    assert ((a + b) + c).children == (a, b, c)
    assert (a + (b + c)).children == (a, b, c)


def test_sum_works() -> None:
    a, b, c = Rect(0, 0, 1, 1), Rect(1, 1, 1, 1), Rect(2, 2, 1, 1)
    fig = sum([a, b, c])
    assert isinstance(fig, Multiple)
    assert fig.children == (a, b, c)


def test_add_raises_on_invalid_type() -> None:
    with pytest.raises(TypeError):
        _ = Rect(0, 0, 1, 1) + 1  # type: ignore[operator]


def test_geometry_is_not_validated() -> None:
    rect = Rect(-1, 0, -200, math.nan)
    assert rect.width == -200
    assert math.isnan(rect.height)
    assert isinstance(Circle(0, 0, math.inf), Fig)
