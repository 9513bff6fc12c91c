"""PygletBackend のイベント変換と y 軸反転をウィンドウ無しで確認する。"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

pyglet = pytest.importorskip("pyglet")
pytest.importorskip("moderngl")

from procsketch.core.backend import Rect, TextSurface  # noqa: E402
from procsketch.core.color import rgb  # noqa: E402
from procsketch.core.errors import RendererCreationError  # noqa: E402
from procsketch.core.events import (  # noqa: E402
    KeyDownEvent,
    MouseButtonEvent,
    MouseMotionEvent,
    QuitEvent,
)
from procsketch.core.keys import Key  # noqa: E402
from procsketch.interactive import pyglet_backend  # noqa: E402
from procsketch.interactive.pyglet_backend import PygletBackend  # noqa: E402


class _StubWindow:
    def __init__(self, width: int = 640, height: int = 480) -> None:
        self.width = width
        self.height = height
        self.handlers: dict[str, Any] = {}

    def switch_to(self) -> None:
        pass

    def push_handlers(self, **handlers: Any) -> None:
        self.handlers.update(handlers)

    def dispatch_events(self) -> None:
        pass

    def get_size(self) -> tuple[int, int]:
        return (self.width, self.height)


class _Shape:
    drawn: list[tuple[str, tuple[Any, ...]]] = []
    kind = ""

    def __init__(self, *args: Any, **_kwargs: Any) -> None:
        self.args = args

    def draw(self) -> None:
        _Shape.drawn.append((self.kind, self.args))


class _Rectangle(_Shape):
    kind = "rectangle"


class _Box(_Shape):
    kind = "box"


class _Line(_Shape):
    kind = "line"


@pytest.fixture
def window(monkeypatch: pytest.MonkeyPatch) -> _StubWindow:
    monkeypatch.setattr(
        pyglet_backend, "moderngl", SimpleNamespace(create_context=lambda require: object())
    )
    monkeypatch.setattr(
        pyglet_backend, "shapes", SimpleNamespace(Rectangle=_Rectangle, Box=_Box, Line=_Line)
    )
    _Shape.drawn = []
    return _StubWindow()


def test_mouse_rows_map_to_top_origin_pixels(window: _StubWindow) -> None:
    backend = PygletBackend(window)

    window.handlers["on_mouse_motion"](5, 0, 0, 0)
    window.handlers["on_mouse_motion"](5, 479, 0, 0)
    window.handlers["on_mouse_press"](7, 100, 1, 0)

    assert backend.poll_events() == [
        MouseMotionEvent(5, 479),
        MouseMotionEvent(5, 0),
        MouseButtonEvent(7, 379, 1),
    ]


def test_drag_is_reported_as_motion(window: _StubWindow) -> None:
    backend = PygletBackend(window)

    window.handlers["on_mouse_drag"](3, 470, 1, 1, 1, 0)

    assert backend.poll_events() == [MouseMotionEvent(3, 9)]


def test_close_and_escape_are_consumed(window: _StubWindow) -> None:
    backend = PygletBackend(window)

    assert window.handlers["on_close"]() == pyglet.event.EVENT_HANDLED
    assert window.handlers["on_key_press"](int(Key.ESCAPE), 0) == pyglet.event.EVENT_HANDLED

    assert backend.poll_events() == [QuitEvent(), KeyDownEvent(int(Key.ESCAPE))]
    assert backend.poll_events() == []


def test_rect_and_line_are_flipped_to_bottom_origin(window: _StubWindow) -> None:
    backend = PygletBackend(window)
    red = rgb(255, 0, 0)

    backend.fill_rect(Rect(10, 20, 30, 40), red)
    backend.stroke_rect(Rect(0, 0, 640, 480), red)
    backend.draw_line(0, 0, 100, 480, red)

    assert _Shape.drawn == [
        ("rectangle", (10, 420, 30, 40)),
        ("box", (0, 0, 640, 480)),
        ("line", (0, 480, 100, 0)),
    ]


def test_text_and_texture_destinations_are_flipped(window: _StubWindow) -> None:
    backend = PygletBackend(window)

    label = SimpleNamespace(x=None, y=None, draw=lambda: None)
    backend.draw_text(TextSurface(label, 50, 12), Rect(4, 8, 50, 12))
    assert (label.x, label.y) == (4, 460)

    blits: list[tuple[int, int, int, int]] = []
    texture = SimpleNamespace(
        width=16,
        height=16,
        blit=lambda x, y, width, height: blits.append((x, y, width, height)),
    )
    backend.draw_texture(texture, Rect(0, 0, 16, 16), Rect(2, 3, 32, 32))
    assert blits == [(2, 445, 32, 32)]


def test_renderer_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(require: int) -> object:
        raise RuntimeError("no GL 3.3")

    monkeypatch.setattr(pyglet_backend, "moderngl", SimpleNamespace(create_context=_fail))

    with pytest.raises(RendererCreationError) as excinfo:
        PygletBackend(_StubWindow())

    assert excinfo.value.exit_status == 2
