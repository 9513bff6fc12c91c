# どこで: `src/procsketch/core/backend.py`。
# 何を: 描画/ウィンドウ/フォント/画像バックエンドが満たすべきインタフェースを定義する。
# なぜ: core（状態/プリミティブ/ループ）をネイティブ実装から切り離し、ヘッドレスでも動かせるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, NamedTuple, Protocol, runtime_checkable

from procsketch.core.color import Color
from procsketch.core.state import TextStyle

if TYPE_CHECKING:
    from procsketch.core.events import Event


class Rect(NamedTuple):
    """左上原点・y 下向きの整数矩形。"""

    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True, slots=True)
class TextSurface:
    """ラスタライズ済み文字列（1 回の text() 呼び出しの間だけ有効）。"""

    handle: Any
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class TextureInfo:
    """読み込み済みテクスチャとその寸法。"""

    handle: Any
    width: int
    height: int


@runtime_checkable
class RenderBackend(Protocol):
    """ネイティブ描画ライブラリへのアダプタ。

    座標はすべて左上原点・y 下向きで渡す。y 軸の反転などはバックエンド側で行う。
    """

    def window_size(self) -> tuple[int, int]: ...

    def set_title(self, title: str) -> None: ...

    def set_size(self, width: int, height: int) -> None: ...

    def clear(self) -> None: ...

    def present(self) -> None: ...

    def fill_rect(self, rect: Rect, color: Color) -> None: ...

    def stroke_rect(self, rect: Rect, color: Color) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None: ...

    def open_font(self, path: Path, size: int) -> Any: ...

    def rasterize_text(
        self, font: Any, text: str, color: Color, style: TextStyle
    ) -> TextSurface: ...

    def draw_text(self, surface: TextSurface, dst: Rect) -> None: ...

    def release_text(self, surface: TextSurface) -> None: ...

    def load_texture(self, path: Path) -> TextureInfo: ...

    def draw_texture(self, texture: Any, src: Rect, dst: Rect) -> None: ...

    def release_texture(self, texture: Any) -> None: ...

    def poll_events(self) -> list[Event]: ...

    def close(self) -> None: ...


__all__ = ["Rect", "RenderBackend", "TextSurface", "TextureInfo"]
