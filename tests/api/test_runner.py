"""api.runner の `run()` を、ウィンドウ/レンダラー生成を差し替えてテスト。"""

from __future__ import annotations

from pathlib import Path

import pytest

from procsketch.api import runner
from procsketch.core.errors import (
    EXIT_RENDERER_CREATION_FAILED,
    EXIT_WINDOW_CREATION_FAILED,
    RendererCreationError,
    WindowCreationError,
)
from procsketch.core.events import QuitEvent
from procsketch.core.recording_backend import RecordingBackend
from procsketch.core.runtime_config import set_config_path


class _FakeWindow:
    def __init__(self, settings) -> None:
        self.settings = settings
        self.closed = False

    def close(self) -> None:
        self.closed = True


class _QuitAfter:
    def __init__(self, frames: int) -> None:
        self.frames = frames
        self.drawn = 0
        self.setup_calls = 0

    def setup(self, ctx) -> None:
        self.setup_calls += 1
        ctx.title("from setup")

    def draw(self, ctx) -> None:
        self.drawn += 1
        if self.drawn == self.frames:
            ctx.backend.queue_events(QuitEvent())


@pytest.fixture(autouse=True)
def _isolate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(runner, "_init_text_backend", lambda: None)
    set_config_path(None)
    yield
    set_config_path(None)


@pytest.fixture
def created(monkeypatch: pytest.MonkeyPatch) -> dict:
    out: dict = {}

    def _window(settings):
        out["window"] = _FakeWindow(settings)
        return out["window"]

    def _backend(window):
        out["backend"] = RecordingBackend(size=window.settings.size, title=window.settings.title)
        return out["backend"]

    monkeypatch.setattr(runner, "_create_window", _window)
    monkeypatch.setattr(runner, "_create_backend", _backend)
    return out


def test_run_calls_setup_once_then_loops_until_quit(created: dict) -> None:
    sketch = _QuitAfter(frames=3)

    runner.run(sketch, size=(320, 200), fps=0)

    backend = created["backend"]
    assert sketch.setup_calls == 1
    assert sketch.drawn == 3
    assert backend.title == "from setup"
    assert backend.window_size() == (320, 200)
    assert backend.closed


def test_run_applies_config_and_overrides(created: dict, tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text('window:\n  title: "cfg title"\n  size: [111, 222]\nloop:\n  fps: 0\n', encoding="utf-8")

    runner.run(_QuitAfter(frames=1), config_path=cfg, size=(50, 60))

    settings = created["window"].settings
    assert settings.title == "cfg title"
    assert settings.size == (50, 60)
    assert settings.fps == 0.0


def test_window_creation_failure_exits_with_status_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(_settings):
        raise WindowCreationError("no display")

    monkeypatch.setattr(runner, "_create_window", _fail)

    with pytest.raises(SystemExit) as excinfo:
        runner.run(_QuitAfter(frames=1))
    assert excinfo.value.code == EXIT_WINDOW_CREATION_FAILED


def test_renderer_creation_failure_exits_with_status_2_and_closes_window(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    windows: list[_FakeWindow] = []

    def _window(settings):
        windows.append(_FakeWindow(settings))
        return windows[-1]

    def _fail(_window):
        raise RendererCreationError("no GL 3.3")

    monkeypatch.setattr(runner, "_create_window", _window)
    monkeypatch.setattr(runner, "_create_backend", _fail)

    with pytest.raises(SystemExit) as excinfo:
        runner.run(_QuitAfter(frames=1))
    assert excinfo.value.code == EXIT_RENDERER_CREATION_FAILED
    assert windows[0].closed


def test_backend_is_closed_when_draw_raises(created: dict) -> None:
    class _Broken:
        def draw(self, ctx) -> None:
            raise KeyError("boom")

    with pytest.raises(KeyError):
        runner.run(_Broken(), fps=0)
    assert created["backend"].closed


def test_run_rejects_object_without_draw(created: dict) -> None:
    with pytest.raises(TypeError):
        runner.run(object())
    assert "window" not in created


def test_text_backend_failure_aborts_before_window(
    created: dict, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _fail() -> None:
        raise RuntimeError("no font backend")

    monkeypatch.setattr(runner, "_init_text_backend", _fail)
    with pytest.raises(RuntimeError):
        runner.run(_QuitAfter(frames=1))
    assert "window" not in created
