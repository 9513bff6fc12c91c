# どこで: `src/procsketch/core/color.py`。
# 何を: 描画色（RGBA の 4 バイト）と、その生成関数 `rgb` / `hex_color` を提供する。
# なぜ: 色を不変値として扱い、状態スタックへ安全に複製できるようにするため。

from __future__ import annotations

from dataclasses import dataclass


def _as_byte(value: int, *, name: str) -> int:
    v = int(value)
    if not 0 <= v <= 255:
        raise ValueError(f"{name} は 0..255 の範囲である必要があります: got={value!r}")
    return v


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA の 4 バイト色。

    Notes
    -----
    alpha は常に 0 で生成され、描画は不透明として扱う（バックエンドは alpha を参照しない）。
    """

    r: int
    g: int
    b: int
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _as_byte(getattr(self, name), name=name)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """(r, g, b) を返す。"""

        return (self.r, self.g, self.b)


def rgb(r: int, g: int, b: int) -> Color:
    """r/g/b の各バイトから色を作る。"""

    return Color(int(r), int(g), int(b), 0)


def hex_color(value: int) -> Color:
    """`0xRRGGBB` 形式の整数から色を作る。上位バイトは無視する。"""

    h = int(value)
    return Color((h >> 16) & 0xFF, (h >> 8) & 0xFF, h & 0xFF, 0)


BLACK = hex_color(0x000000)
WHITE = hex_color(0xFFFFFF)

__all__ = ["BLACK", "Color", "WHITE", "hex_color", "rgb"]
