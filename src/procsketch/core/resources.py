# どこで: `src/procsketch/core/resources.py`。
# 何を: フォント/画像のハンドルと、その読み込み関数を提供する。
# なぜ: 読み込み失敗を説明付きの例外として呼び出し側へ返し、画像の解放を明示的に行えるようにするため。

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from procsketch.core.backend import RenderBackend, TextureInfo
from procsketch.core.errors import FontLoadError, ImageLoadError, ResourceReleasedError
from procsketch.core.font_resolver import resolve_font_path

if TYPE_CHECKING:
    from procsketch.core.canvas import Canvas

_logger = logging.getLogger(__name__)


class Font:
    """1 つの (ファイル, ポイントサイズ) に対応するフォントハンドル。

    Notes
    -----
    解放 API は持たない。ハンドルはバックエンド側の GC/プロセス終了で回収される。
    """

    def __init__(self, handle: Any, *, path: Path, size: int) -> None:
        self.handle = handle
        self.path = Path(path)
        self.size = int(size)

    def __repr__(self) -> str:
        return f"Font(path={str(self.path)!r}, size={self.size})"


class Image:
    """読み込み済み画像。`free()` でテクスチャを解放する。"""

    def __init__(self, texture: TextureInfo, *, canvas: Canvas, path: Path) -> None:
        self._texture: TextureInfo | None = texture
        self._canvas = canvas
        self.path = Path(path)
        self.width = int(texture.width)
        self.height = int(texture.height)

    @property
    def released(self) -> bool:
        return self._texture is None

    @property
    def texture(self) -> Any:
        """バックエンドのテクスチャハンドルを返す。解放後は例外。"""

        tex = self._texture
        if tex is None:
            raise ResourceReleasedError(f"解放済みの画像です: {self.path}")
        return tex.handle

    def draw(self, x: int, y: int) -> None:
        """原寸で (x, y) に描く。"""

        self._canvas.image(self, x, y)

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        """(x, y, w, h) へ拡大縮小して描く。"""

        self._canvas.image(self, x, y, w, h)

    def free(self) -> None:
        """テクスチャを解放する。2 回目以降の呼び出しは例外。"""

        handle = self.texture
        self._texture = None
        self._canvas.backend.release_texture(handle)

    def __repr__(self) -> str:
        state = "released" if self.released else f"{self.width}x{self.height}"
        return f"Image(path={str(self.path)!r}, {state})"


def create_font(backend: RenderBackend, font: str | Path, size: int) -> Font:
    """フォントを開いて返す。失敗時は FontLoadError。

    `font` は実在パス、または config の `font_dirs` 内のファイル名/部分一致名。
    """

    if int(size) <= 0:
        raise FontLoadError(
            f"フォントサイズは正の値である必要があります: got={size!r}", path=str(font)
        )
    try:
        path = resolve_font_path(str(font))
    except FileNotFoundError as exc:
        raise FontLoadError(f"Could not open font: {exc}", path=str(font)) from exc

    try:
        handle = backend.open_font(path, int(size))
    except Exception as exc:
        raise FontLoadError(f"Could not open font: {path}: {exc}", path=str(path)) from exc

    _logger.debug("Opened font %s (%dpt)", path, int(size))
    return Font(handle, path=path, size=int(size))


def load_image(canvas: Canvas, path: str | Path) -> Image:
    """画像をデコードしてテクスチャ化し返す。失敗時は ImageLoadError。"""

    p = Path(path).expanduser()
    if not p.is_file():
        raise ImageLoadError(f"Could not load image: no such file: {p}", path=str(p))
    try:
        texture = canvas.backend.load_texture(p)
    except Exception as exc:
        raise ImageLoadError(f"Could not load image: {p}: {exc}", path=str(p)) from exc

    _logger.debug("Loaded image %s (%dx%d)", p, texture.width, texture.height)
    return Image(texture, canvas=canvas, path=p)


__all__ = ["Font", "Image", "create_font", "load_image"]
