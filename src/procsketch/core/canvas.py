# どこで: `src/procsketch/core/canvas.py`。
# 何を: 現在の描画状態を参照してバックエンドへ描画命令を出すプリミティブ群を提供する。
# なぜ: rect/line/text/image の「状態の解釈」を 1 箇所へ集め、バックエンドは単純な命令だけを受ければよくするため。

from __future__ import annotations

import logging

from procsketch.core.backend import Rect, RenderBackend
from procsketch.core.color import Color
from procsketch.core.errors import FontNotSetError
from procsketch.core.resources import Font, Image
from procsketch.core.state import DrawState, StateStack, TextAlign, TextStyle
from procsketch.core.text_layout import text_destination

_logger = logging.getLogger(__name__)


def _check_size(w: int, h: int) -> None:
    if int(w) < 0 or int(h) < 0:
        raise ValueError(f"幅/高さは 0 以上である必要があります: got=({w}, {h})")


class Canvas:
    """描画状態スタックとプリミティブ。

    Notes
    -----
    座標は左上原点・y 下向きの整数。`line()` 以外は現在の平行移動量を加算する。
    """

    def __init__(self, backend: RenderBackend, *, stack: StateStack | None = None) -> None:
        self.backend = backend
        self._stack = stack if stack is not None else StateStack()
        self._font: Font | None = None

    # --- 状態 ---

    @property
    def state(self) -> DrawState:
        """現在の描画状態を返す。"""

        return self._stack.current

    @property
    def font(self) -> Font | None:
        return self._font

    def push(self) -> None:
        self._stack.push()

    def pop(self) -> None:
        self._stack.pop()

    def fill(self, color: Color) -> None:
        self._stack.set_fill(color)

    def stroke(self, color: Color) -> None:
        self._stack.set_stroke(color)

    def no_fill(self) -> None:
        self._stack.no_fill()

    def no_stroke(self) -> None:
        self._stack.no_stroke()

    def text_align(self, align: TextAlign) -> None:
        self._stack.set_text_align(align)

    def text_style(self, style: TextStyle) -> None:
        self._stack.set_text_style(style)

    def translate(self, dx: int, dy: int) -> None:
        self._stack.translate(dx, dy)

    def set_font(self, font: Font | None) -> None:
        """以降の text() で使うフォントを設定する。"""

        self._font = font

    # --- プリミティブ ---

    def rect(self, x: int, y: int, w: int, h: int) -> None:
        """矩形を描く。塗り → 輪郭の順。"""

        _check_size(w, h)
        st = self._stack.current
        r = Rect(int(x) + st.offset_x, int(y) + st.offset_y, int(w), int(h))
        if st.draws_fill:
            self.backend.fill_rect(r, st.fill_color)  # type: ignore[arg-type]
        if st.draws_stroke:
            self.backend.stroke_rect(r, st.stroke_color)  # type: ignore[arg-type]

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """線分を描く。平行移動量は加算しない。"""

        st = self._stack.current
        if not st.draws_stroke:
            return
        self.backend.draw_line(
            int(x1), int(y1), int(x2), int(y2), st.stroke_color  # type: ignore[arg-type]
        )

    def background(self, color: Color) -> None:
        """塗り色を `color` にしてウィンドウ全体の矩形を描く。"""

        self.fill(color)
        w, h = self.backend.window_size()
        self.rect(0, 0, w, h)

    def text(self, txt: str, x: int, y: int, w: int, h: int) -> None:
        """文字列を現在のフォント/塗り色/スタイルで描く。空文字列は何もしない。

        ラスタライズ結果は呼び出しごとに生成して破棄する（キャッシュしない）。
        バックエンドがラスタライズに失敗した場合はログに残してこの呼び出しだけを諦める。
        """

        if not txt:
            return
        font = self._font
        if font is None:
            raise FontNotSetError("text() の前に set_font() でフォントを設定してください")

        st = self._stack.current
        color = st.fill_color if st.fill_color is not None else Color(0, 0, 0)
        try:
            surface = self.backend.rasterize_text(font.handle, str(txt), color, st.text_style)
        except Exception:
            _logger.exception("Failed to rasterize text: %r", txt)
            return

        try:
            dst = text_destination(
                st.text_align,
                x=x,
                y=y,
                w=w,
                h=h,
                natural_w=surface.width,
                natural_h=surface.height,
                offset_x=st.offset_x,
                offset_y=st.offset_y,
            )
            self.backend.draw_text(surface, dst)
        finally:
            self.backend.release_text(surface)

    def image(self, img: Image, x: int, y: int, w: int | None = None, h: int | None = None) -> None:
        """画像を描く。w/h を省略すると原寸。"""

        texture = img.texture
        dw = img.width if w is None else int(w)
        dh = img.height if h is None else int(h)
        _check_size(dw, dh)
        st = self._stack.current
        self.backend.draw_texture(
            texture,
            Rect(0, 0, img.width, img.height),
            Rect(int(x) + st.offset_x, int(y) + st.offset_y, dw, dh),
        )


__all__ = ["Canvas"]
