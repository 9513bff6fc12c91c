# どこで: `src/procsketch/core/events.py`。
# 何を: 入力イベント型、入力状態（キー/マウス）、およびイベントをスケッチへ配送するディスパッチャを提供する。
# なぜ: バックエンド固有のイベントを共通の型へ寄せ、毎フレーム描画前に同じスレッドで順に処理するため。

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Union

from procsketch.core.sketch import KEY_PRESSED, MOUSE_CLICKED, hook

if TYPE_CHECKING:
    from procsketch.core.context import SketchContext


@dataclass(frozen=True, slots=True)
class QuitEvent:
    """ウィンドウが閉じられた。"""


@dataclass(frozen=True, slots=True)
class KeyDownEvent:
    symbol: int


@dataclass(frozen=True, slots=True)
class MouseMotionEvent:
    """マウス移動（左上原点・y 下向き）。"""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class MouseButtonEvent:
    x: int
    y: int
    button: int = 1


Event = Union[QuitEvent, KeyDownEvent, MouseMotionEvent, MouseButtonEvent]


@dataclass(slots=True)
class InputState:
    """最後に処理したイベント時点のキー/マウス状態。ディスパッチャだけが書き換える。"""

    key: int = 0
    mouse_x: int = 0
    mouse_y: int = 0
    pmouse_x: int = 0
    pmouse_y: int = 0


class EventDispatcher:
    """溜まったイベントを順に処理し、入力状態更新とフック呼び出しを行う。"""

    def __init__(self, sketch: Any, ctx: SketchContext, input_state: InputState) -> None:
        self._ctx = ctx
        self._input = input_state
        self._on_key_pressed = hook(sketch, KEY_PRESSED)
        self._on_mouse_clicked = hook(sketch, MOUSE_CLICKED)

    def dispatch(self, events: Iterable[Event]) -> bool:
        """イベントをすべて処理する。QuitEvent を受け取った場合は True を返す。

        Notes
        -----
        QuitEvent 以降のイベントも処理する（同じフレームで届いた入力は取りこぼさない）。
        """

        quit_requested = False
        state = self._input
        for event in events:
            if isinstance(event, QuitEvent):
                quit_requested = True
            elif isinstance(event, KeyDownEvent):
                state.key = int(event.symbol)
                if self._on_key_pressed is not None:
                    self._on_key_pressed(self._ctx)
            elif isinstance(event, MouseMotionEvent):
                state.pmouse_x, state.pmouse_y = state.mouse_x, state.mouse_y
                state.mouse_x, state.mouse_y = int(event.x), int(event.y)
            elif isinstance(event, MouseButtonEvent):
                if self._on_mouse_clicked is not None:
                    self._on_mouse_clicked(self._ctx)
            else:
                raise TypeError(f"未知のイベントです: {event!r}")
        return quit_requested


__all__ = [
    "Event",
    "EventDispatcher",
    "InputState",
    "KeyDownEvent",
    "MouseButtonEvent",
    "MouseMotionEvent",
    "QuitEvent",
]
