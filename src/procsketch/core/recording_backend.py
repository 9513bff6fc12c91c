# どこで: `src/procsketch/core/recording_backend.py`。
# 何を: 描画命令を記録するだけのヘッドレスバックエンドを提供する。
# なぜ: ウィンドウや GL コンテキスト無しで、プリミティブ/イベント処理/フレームループを動かして検証するため。

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from procsketch.core.backend import Rect, TextSurface, TextureInfo
from procsketch.core.color import Color
from procsketch.core.events import Event
from procsketch.core.state import TextStyle


@dataclass(frozen=True, slots=True)
class DrawCommand:
    """記録された 1 つの命令。`op` は fill_rect/stroke_rect/line/text/texture/clear/present。"""

    op: str
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class RecordedFont:
    path: Path
    size: int

    @property
    def glyph_width(self) -> int:
        return max(1, self.size // 2)


@dataclass(slots=True)
class RecordedTexture:
    path: Path
    width: int
    height: int
    released: bool = False


@dataclass(slots=True)
class _RecordedText:
    text: str
    color: Color
    style: TextStyle
    released: bool = False


FRAME_OPS = frozenset({"clear", "present"})


@dataclass
class RecordingBackend:
    """描画命令を `commands` に積むバックエンド。

    Notes
    -----
    - 文字の実寸は等幅近似（幅 = 文字数 × size//2、高さ = size）。
    - 画像は `register_image(path, w, h)` で登録したパスだけデコードできる。
    - イベントは `queue_events()` で積み、`poll_events()` で取り出す。
    """

    size: tuple[int, int] = (640, 480)
    title: str = "Debug view"
    commands: list[DrawCommand] = field(default_factory=list)
    closed: bool = False
    _events: deque[Event] = field(default_factory=deque)
    _images: dict[Path, tuple[int, int]] = field(default_factory=dict)
    _live_text: list[_RecordedText] = field(default_factory=list)

    # --- 記録の参照 ---

    @property
    def draw_commands(self) -> list[DrawCommand]:
        """clear/present を除いた描画命令を返す。"""

        return [c for c in self.commands if c.op not in FRAME_OPS]

    @property
    def live_text_surfaces(self) -> int:
        """未解放の文字サーフェス数を返す。"""

        return sum(1 for t in self._live_text if not t.released)

    def reset_commands(self) -> None:
        self.commands.clear()

    def queue_events(self, *events: Event) -> None:
        self._events.extend(events)

    def register_image(self, path: str | Path, width: int, height: int) -> None:
        self._images[Path(path).resolve()] = (int(width), int(height))

    # --- RenderBackend ---

    def window_size(self) -> tuple[int, int]:
        return (int(self.size[0]), int(self.size[1]))

    def set_title(self, title: str) -> None:
        self.title = str(title)

    def set_size(self, width: int, height: int) -> None:
        self.size = (int(width), int(height))

    def clear(self) -> None:
        self.commands.append(DrawCommand("clear"))

    def present(self) -> None:
        self.commands.append(DrawCommand("present"))

    def fill_rect(self, rect: Rect, color: Color) -> None:
        self.commands.append(DrawCommand("fill_rect", (rect, color)))

    def stroke_rect(self, rect: Rect, color: Color) -> None:
        self.commands.append(DrawCommand("stroke_rect", (rect, color)))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        self.commands.append(DrawCommand("line", ((x1, y1, x2, y2), color)))

    def open_font(self, path: Path, size: int) -> RecordedFont:
        p = Path(path)
        if p.stat().st_size == 0:
            raise ValueError(f"not a font file: {p}")
        return RecordedFont(path=p, size=int(size))

    def rasterize_text(
        self, font: RecordedFont, text: str, color: Color, style: TextStyle
    ) -> TextSurface:
        handle = _RecordedText(text=str(text), color=color, style=style)
        self._live_text.append(handle)
        return TextSurface(handle, len(text) * font.glyph_width, font.size)

    def draw_text(self, surface: TextSurface, dst: Rect) -> None:
        h: _RecordedText = surface.handle
        self.commands.append(DrawCommand("text", (h.text, dst, h.color, h.style)))

    def release_text(self, surface: TextSurface) -> None:
        surface.handle.released = True

    def load_texture(self, path: Path) -> TextureInfo:
        key = Path(path).resolve()
        dims = self._images.get(key)
        if dims is None:
            raise ValueError(f"unsupported image format: {path}")
        tex = RecordedTexture(path=key, width=dims[0], height=dims[1])
        return TextureInfo(tex, dims[0], dims[1])

    def draw_texture(self, texture: RecordedTexture, src: Rect, dst: Rect) -> None:
        self.commands.append(DrawCommand("texture", (texture.path, src, dst)))

    def release_texture(self, texture: RecordedTexture) -> None:
        texture.released = True

    def poll_events(self) -> list[Event]:
        out = list(self._events)
        self._events.clear()
        return out

    def close(self) -> None:
        self.closed = True


__all__ = ["DrawCommand", "RecordedFont", "RecordedTexture", "RecordingBackend"]
