# どこで: `src/procsketch/core/state.py`。
# 何を: 描画状態（塗り/線/文字/平行移動）と、その push/pop スタックを提供する。
# なぜ: スタイル変更を push〜pop の区間に閉じ込め、プリミティブからは「現在の状態」だけを見ればよくするため。

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from procsketch.core.color import BLACK, WHITE, Color
from procsketch.core.errors import StateStackUnderflowError


class TextStyle(Enum):
    """文字のラスタライズ方式。"""

    NORMAL = "normal"
    BOLD = "bold"


class TextAlign(Enum):
    """text() の配置方式。"""

    CENTER = "center"
    LEFT = "left"


@dataclass(frozen=True, slots=True)
class DrawState:
    """1 つの描画状態（不変値）。"""

    fill_color: Color | None = BLACK
    stroke_color: Color | None = WHITE
    fill_enabled: bool = True
    stroke_enabled: bool = True
    text_style: TextStyle = TextStyle.NORMAL
    text_align: TextAlign = TextAlign.CENTER
    offset_x: int = 0
    offset_y: int = 0

    @property
    def draws_fill(self) -> bool:
        """塗りが有効かつ色が設定されていれば True。"""

        return self.fill_enabled and self.fill_color is not None

    @property
    def draws_stroke(self) -> bool:
        """線が有効かつ色が設定されていれば True。"""

        return self.stroke_enabled and self.stroke_color is not None


DEFAULT_STATE = DrawState()


class StateStack:
    """DrawState のスタック。

    Notes
    -----
    常に 1 要素以上を保持し、底は既定状態。
    変更系メソッドは先頭（現在の状態）だけを置き換える。
    """

    def __init__(self, initial: DrawState = DEFAULT_STATE) -> None:
        self._stack: list[DrawState] = [initial]

    @property
    def current(self) -> DrawState:
        """現在の描画状態を返す。"""

        return self._stack[-1]

    @property
    def depth(self) -> int:
        """保持している状態の数（既定状態を含む）を返す。"""

        return len(self._stack)

    def push(self) -> None:
        """現在の状態を複製し、複製を現在の状態にする。"""

        self._stack.append(self._stack[-1])

    def pop(self) -> DrawState:
        """現在の状態を破棄して 1 つ前へ戻し、破棄した状態を返す。"""

        if len(self._stack) <= 1:
            raise StateStackUnderflowError(
                "pop() に対応する push() がありません（既定状態は pop できません）"
            )
        return self._stack.pop()

    def reset(self) -> None:
        """既定状態だけのスタックへ戻す。"""

        del self._stack[1:]
        self._stack[0] = DEFAULT_STATE

    def _update(self, **changes: object) -> None:
        self._stack[-1] = replace(self._stack[-1], **changes)

    def set_fill(self, color: Color) -> None:
        self._update(fill_color=color, fill_enabled=True)

    def set_stroke(self, color: Color) -> None:
        self._update(stroke_color=color, stroke_enabled=True)

    def no_fill(self) -> None:
        self._update(fill_enabled=False)

    def no_stroke(self) -> None:
        self._update(stroke_enabled=False)

    def set_text_align(self, align: TextAlign) -> None:
        self._update(text_align=TextAlign(align))

    def set_text_style(self, style: TextStyle) -> None:
        self._update(text_style=TextStyle(style))

    def translate(self, dx: int, dy: int) -> None:
        """平行移動量を現在のオフセットへ加算する。"""

        cur = self._stack[-1]
        self._update(offset_x=cur.offset_x + int(dx), offset_y=cur.offset_y + int(dy))


__all__ = [
    "DEFAULT_STATE",
    "DrawState",
    "StateStack",
    "TextAlign",
    "TextStyle",
]
