# どこで: `src/procsketch/__init__.py`。
# 何を: ルート `procsketch` パッケージを定義する。
# なぜ: import 起点を `procsketch` に統一するため。

from __future__ import annotations

from procsketch.api import (
    ALIGN_CENTER,
    ALIGN_LEFT,
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RETURN,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    STYLE_BOLD,
    STYLE_NORMAL,
    SketchContext,
    hex_color,
    rgb,
    run,
)

__all__ = [
    "ALIGN_CENTER",
    "ALIGN_LEFT",
    "KEY_DOWN",
    "KEY_ESC",
    "KEY_LEFT",
    "KEY_RETURN",
    "KEY_RIGHT",
    "KEY_SPACE",
    "KEY_UP",
    "STYLE_BOLD",
    "STYLE_NORMAL",
    "SketchContext",
    "hex_color",
    "rgb",
    "run",
]
