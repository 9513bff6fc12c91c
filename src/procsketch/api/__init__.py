# どこで: `src/procsketch/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして run と、描画で使う型/定数を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from procsketch.core.color import Color, hex_color, rgb
from procsketch.core.context import SketchContext
from procsketch.core.errors import (
    FontLoadError,
    ImageLoadError,
    ProcsketchError,
    StateStackUnderflowError,
)
from procsketch.core.keys import (
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RETURN,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    Key,
)
from procsketch.core.resources import Font, Image
from procsketch.core.sketch import Sketch
from procsketch.core.state import TextAlign, TextStyle

ALIGN_CENTER = TextAlign.CENTER
ALIGN_LEFT = TextAlign.LEFT
STYLE_NORMAL = TextStyle.NORMAL
STYLE_BOLD = TextStyle.BOLD

__all__ = [
    "ALIGN_CENTER",
    "ALIGN_LEFT",
    "Color",
    "Font",
    "FontLoadError",
    "Image",
    "ImageLoadError",
    "KEY_DOWN",
    "KEY_ESC",
    "KEY_LEFT",
    "KEY_RETURN",
    "KEY_RIGHT",
    "KEY_SPACE",
    "KEY_UP",
    "Key",
    "ProcsketchError",
    "STYLE_BOLD",
    "STYLE_NORMAL",
    "Sketch",
    "SketchContext",
    "StateStackUnderflowError",
    "TextAlign",
    "TextStyle",
    "hex_color",
    "rgb",
    "run",
]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
