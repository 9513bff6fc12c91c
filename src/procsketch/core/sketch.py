# どこで: `src/procsketch/core/sketch.py`。
# 何を: ユーザーのスケッチが満たすインタフェースと、任意フックの有無を調べる関数を提供する。
# なぜ: draw は必須、setup/key_pressed/mouse_clicked は「実装されていれば呼ぶ」という約束を明示するため。

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from procsketch.core.context import SketchContext

SETUP = "setup"
KEY_PRESSED = "key_pressed"
MOUSE_CLICKED = "mouse_clicked"


@runtime_checkable
class Sketch(Protocol):
    """スケッチの必須部分。毎フレーム `draw(ctx)` が呼ばれる。"""

    def draw(self, ctx: SketchContext) -> None: ...


def validate_sketch(sketch: Any) -> Sketch:
    """`draw` を持たないオブジェクトなら TypeError。"""

    if not callable(getattr(sketch, "draw", None)):
        raise TypeError(f"sketch は draw(ctx) を実装している必要があります: got={sketch!r}")
    return sketch


def hook(sketch: Any, name: str) -> Callable[[SketchContext], None] | None:
    """任意フック `name` が実装されていれば bound method を、無ければ None を返す。"""

    fn = getattr(sketch, name, None)
    return fn if callable(fn) else None


__all__ = [
    "KEY_PRESSED",
    "MOUSE_CLICKED",
    "SETUP",
    "Sketch",
    "hook",
    "validate_sketch",
]
