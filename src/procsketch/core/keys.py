# どこで: `src/procsketch/core/keys.py`。
# 何を: スケッチから参照するキーコード定数を定義する。
# なぜ: core を pyglet に依存させずにキー比較できるようにするため（値は `pyglet.window.key` と一致させる）。

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """よく使うキーのシンボル値（pyglet のキーシンボルと同値）。"""

    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53
    RETURN = 0xFF0D
    ESCAPE = 0xFF1B
    SPACE = 0x0020


KEY_UP = Key.UP
KEY_DOWN = Key.DOWN
KEY_LEFT = Key.LEFT
KEY_RIGHT = Key.RIGHT
KEY_RETURN = Key.RETURN
KEY_ESC = Key.ESCAPE
KEY_SPACE = Key.SPACE

__all__ = [
    "KEY_DOWN",
    "KEY_ESC",
    "KEY_LEFT",
    "KEY_RETURN",
    "KEY_RIGHT",
    "KEY_SPACE",
    "KEY_UP",
    "Key",
]
