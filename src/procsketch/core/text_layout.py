# どこで: `src/procsketch/core/text_layout.py`。
# 何を: text() の描画先矩形を、配置方式と実寸から計算する。
# なぜ: 配置規則を純関数として切り出し、バックエンド無しで検証できるようにするため。

from __future__ import annotations

from procsketch.core.backend import Rect
from procsketch.core.state import TextAlign


def _centering_gap(natural: int, given: int) -> int:
    return (max(natural, given) - min(natural, given)) // 2


def text_destination(
    align: TextAlign,
    *,
    x: int,
    y: int,
    w: int,
    h: int,
    natural_w: int,
    natural_h: int,
    offset_x: int = 0,
    offset_y: int = 0,
) -> Rect:
    """文字列の描画先矩形を返す。

    Parameters
    ----------
    align : TextAlign
        CENTER は (w, h) の箱と実寸の差の半分だけずらす。LEFT は (x, y) にそのまま置き、w/h は見ない。
    x, y, w, h : int
        text() に渡された箱。
    natural_w, natural_h : int
        ラスタライズ後の実寸。描画先矩形の幅/高さは常にこれになる。
    offset_x, offset_y : int
        現在の平行移動量。

    Returns
    -------
    Rect
        描画先矩形。
    """

    base_x = int(x) + int(offset_x)
    base_y = int(y) + int(offset_y)
    if align is TextAlign.CENTER:
        return Rect(
            base_x + _centering_gap(int(natural_w), int(w)),
            base_y + _centering_gap(int(natural_h), int(h)),
            int(natural_w),
            int(natural_h),
        )
    if align is TextAlign.LEFT:
        return Rect(base_x, base_y, int(natural_w), int(natural_h))
    raise ValueError(f"未知の TextAlign です: {align!r}")


__all__ = ["text_destination"]
