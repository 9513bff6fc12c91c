from __future__ import annotations

from procsketch.core.backend import Rect
from procsketch.core.state import TextAlign
from procsketch.core.text_layout import text_destination


def test_center_when_box_is_larger_than_text() -> None:
    r = text_destination(TextAlign.CENTER, x=10, y=20, w=100, h=30, natural_w=40, natural_h=10)
    assert r == Rect(10 + 30, 20 + 10, 40, 10)


def test_center_uses_absolute_difference_when_text_is_larger() -> None:
    # 実寸の方が大きくても差の絶対値の半分だけ右下へずらす
    r = text_destination(TextAlign.CENTER, x=0, y=0, w=10, h=4, natural_w=50, natural_h=20)
    assert r == Rect(20, 8, 50, 20)


def test_center_adds_offset_and_truncates_half() -> None:
    r = text_destination(
        TextAlign.CENTER,
        x=1,
        y=1,
        w=11,
        h=6,
        natural_w=4,
        natural_h=3,
        offset_x=100,
        offset_y=200,
    )
    assert r == Rect(101 + 3, 201 + 1, 4, 3)


def test_left_ignores_box_size() -> None:
    a = text_destination(TextAlign.LEFT, x=5, y=6, w=1000, h=1000, natural_w=40, natural_h=10, offset_x=1, offset_y=2)
    b = text_destination(TextAlign.LEFT, x=5, y=6, w=0, h=0, natural_w=40, natural_h=10, offset_x=1, offset_y=2)
    assert a == b == Rect(6, 8, 40, 10)
