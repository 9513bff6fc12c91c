# どこで: `src/procsketch/interactive/pyglet_backend.py`。
# 何を: pyglet（ウィンドウ/入力/文字/画像）と ModernGL（viewport/clear）で RenderBackend を実装する。
# なぜ: core の描画命令（左上原点・y 下向き）を、pyglet の座標系（左下原点・y 上向き）へ写すため。

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import moderngl
import pyglet
from pyglet import shapes
from pyglet.window import Window

from procsketch.core.backend import Rect, TextSurface, TextureInfo
from procsketch.core.color import Color
from procsketch.core.errors import RendererCreationError
from procsketch.core.events import (
    Event,
    KeyDownEvent,
    MouseButtonEvent,
    MouseMotionEvent,
    QuitEvent,
)
from procsketch.core.state import TextStyle

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PygletFont:
    """pyglet に登録済みのフォントファミリとサイズ。"""

    family: str
    size: int
    path: Path


def _rgba(color: Color) -> tuple[int, int, int, int]:
    # alpha は使わず不透明で描く。
    return (color.r, color.g, color.b, 255)


def font_family_name(path: Path) -> str:
    """フォントファイルのファミリ名を返す（pyglet はファミリ名でフォントを引くため）。"""

    from fontTools.ttLib import TTFont  # type: ignore[import-untyped]

    if path.suffix.lower() == ".ttc":
        font = TTFont(path, fontNumber=0, lazy=True)
    else:
        font = TTFont(path, lazy=True)
    try:
        family = font["name"].getBestFamilyName()
    finally:
        font.close()
    if not family:
        raise ValueError(f"フォントのファミリ名を取得できません: {path}")
    return str(family)


class PygletBackend:
    """1 つの pyglet ウィンドウに描くバックエンド。

    Notes
    -----
    pyglet のイベントハンドラは `dispatch_events()` 中に同じスレッドで呼ばれるため、
    ここでは共通イベントへ変換してキューへ積むだけにする。スケッチのフック呼び出しは core 側で行う。
    """

    def __init__(self, window: Window) -> None:
        self.window = window
        try:
            window.switch_to()
            self.ctx = moderngl.create_context(require=330)
        except Exception as exc:
            raise RendererCreationError(f"Failed to create renderer: {exc}") from exc

        self._events: deque[Event] = deque()
        window.push_handlers(
            on_close=self._on_close,
            on_key_press=self._on_key_press,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_mouse_press=self._on_mouse_press,
        )

    # --- 座標変換 ---

    def _flip_y(self, y: int, h: int = 0) -> int:
        return int(self.window.height) - int(y) - int(h)

    def _flip_point_y(self, y: int) -> int:
        # ピクセル行 0..H-1 を上端基準へ写す。
        return int(self.window.height) - 1 - int(y)

    # --- pyglet イベント ---

    def _on_close(self) -> bool:
        # ウィンドウの破棄は close() で行うため、既定の on_close は止める。
        self._events.append(QuitEvent())
        return pyglet.event.EVENT_HANDLED

    def _on_key_press(self, symbol: int, _modifiers: int) -> bool:
        self._events.append(KeyDownEvent(int(symbol)))
        # ESC で閉じる既定動作を止め、キーとしてスケッチへ渡す。
        return pyglet.event.EVENT_HANDLED

    def _on_mouse_motion(self, x: int, y: int, _dx: int, _dy: int) -> None:
        self._events.append(MouseMotionEvent(int(x), self._flip_point_y(y)))

    def _on_mouse_drag(
        self, x: int, y: int, _dx: int, _dy: int, _buttons: int, _modifiers: int
    ) -> None:
        self._events.append(MouseMotionEvent(int(x), self._flip_point_y(y)))

    def _on_mouse_press(self, x: int, y: int, button: int, _modifiers: int) -> None:
        self._events.append(MouseButtonEvent(int(x), self._flip_point_y(y), int(button)))

    # --- RenderBackend ---

    def window_size(self) -> tuple[int, int]:
        w, h = self.window.get_size()
        return (int(w), int(h))

    def set_title(self, title: str) -> None:
        self.window.set_caption(str(title))

    def set_size(self, width: int, height: int) -> None:
        self.window.set_size(int(width), int(height))

    def _framebuffer_size(self) -> tuple[int, int]:
        getter = getattr(self.window, "get_framebuffer_size", None)
        if callable(getter):
            w, h = getter()
            return int(w), int(h)
        return int(self.window.width), int(self.window.height)

    def clear(self) -> None:
        self.window.switch_to()
        self.ctx.screen.use()
        fb_w, fb_h = self._framebuffer_size()
        self.ctx.viewport = (0, 0, fb_w, fb_h)
        self.ctx.clear(0.0, 0.0, 0.0, 1.0)

    def present(self) -> None:
        self.window.flip()

    def fill_rect(self, rect: Rect, color: Color) -> None:
        shapes.Rectangle(
            rect.x, self._flip_y(rect.y, rect.h), rect.w, rect.h, color=_rgba(color)
        ).draw()

    def stroke_rect(self, rect: Rect, color: Color) -> None:
        shapes.Box(
            rect.x, self._flip_y(rect.y, rect.h), rect.w, rect.h, color=_rgba(color)
        ).draw()

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        shapes.Line(x1, self._flip_y(y1), x2, self._flip_y(y2), color=_rgba(color)).draw()

    def open_font(self, path: Path, size: int) -> PygletFont:
        family = font_family_name(path)
        pyglet.font.add_file(str(path))
        if not pyglet.font.have_font(family):
            raise ValueError(f"pyglet がフォントファミリを認識できません: family={family!r}")
        return PygletFont(family=family, size=int(size), path=Path(path))

    def rasterize_text(
        self, font: PygletFont, text: str, color: Color, style: TextStyle
    ) -> TextSurface:
        label = pyglet.text.Label(
            str(text),
            font_name=font.family,
            font_size=font.size,
            weight="bold" if style is TextStyle.BOLD else "normal",
            color=_rgba(color),
            anchor_x="left",
            anchor_y="bottom",
        )
        return TextSurface(label, int(label.content_width), int(label.content_height))

    def draw_text(self, surface: TextSurface, dst: Rect) -> None:
        label = surface.handle
        label.x = dst.x
        label.y = self._flip_y(dst.y, dst.h)
        label.draw()

    def release_text(self, surface: TextSurface) -> None:
        surface.handle.delete()

    def load_texture(self, path: Path) -> TextureInfo:
        image = pyglet.image.load(str(path))
        texture = image.get_texture()
        return TextureInfo(texture, int(texture.width), int(texture.height))

    def draw_texture(self, texture: Any, src: Rect, dst: Rect) -> None:
        region = texture
        if (src.x, src.y, src.w, src.h) != (0, 0, texture.width, texture.height):
            region = texture.get_region(src.x, texture.height - src.y - src.h, src.w, src.h)
        region.blit(dst.x, self._flip_y(dst.y, dst.h), width=dst.w, height=dst.h)

    def release_texture(self, texture: Any) -> None:
        texture.delete()

    def poll_events(self) -> list[Event]:
        self.window.dispatch_events()
        out = list(self._events)
        self._events.clear()
        return out

    def close(self) -> None:
        """GL コンテキストとウィンドウを解放する。"""

        try:
            self.ctx.release()
        except Exception:
            _logger.exception("Failed to release ModernGL context")
        self.window.close()


__all__ = ["PygletBackend", "PygletFont", "font_family_name"]
