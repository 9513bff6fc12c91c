# どこで: `src/procsketch/api/runner.py`。公開 API のランナー実装。
# 何を: ウィンドウ/レンダラーを作り、setup を 1 度呼んでからフレームループを回す `run()` を提供する。
# なぜ: 初期化失敗の終了コード・後始末・設定の上書き順を 1 箇所で扱うため。

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from procsketch.core.backend import RenderBackend
from procsketch.core.context import SketchContext
from procsketch.core.errors import InitializationError
from procsketch.core.fps import FpsGovernor, FpsMeter
from procsketch.core.frame_loop import FrameLoop
from procsketch.core.runtime_config import runtime_config, set_config_path
from procsketch.core.sketch import SETUP, hook, validate_sketch
from procsketch.interactive.window_settings import WindowSettings

_logger = logging.getLogger(__name__)


def _init_text_backend() -> None:
    # pyglet.font を読み込めなければ即座に止める。
    try:
        import pyglet.font  # noqa: F401
    except Exception as exc:
        raise RuntimeError(f"文字描画バックエンド（pyglet.font）を初期化できません: {exc}") from exc


def _create_window(settings: WindowSettings) -> Any:
    from procsketch.interactive.window import create_window

    return create_window(settings)


def _create_backend(window: Any) -> RenderBackend:
    from procsketch.interactive.pyglet_backend import PygletBackend

    return PygletBackend(window)


def _close_window(window: Any) -> None:
    close = getattr(window, "close", None)
    if callable(close):
        close()


def run(
    sketch: Any,
    *,
    title: str | None = None,
    size: tuple[int, int] | None = None,
    fps: float | None = None,
    config_path: str | Path | None = None,
) -> None:
    """ウィンドウを開き、閉じられるまでスケッチを実行する。

    Parameters
    ----------
    sketch : Any
        `draw(ctx)` を実装したオブジェクト。`setup(ctx)` / `key_pressed(ctx)` /
        `mouse_clicked(ctx)` は実装されていれば呼ばれる。
    title : str | None
        ウィンドウタイトル。None なら config の `window.title`。
    size : tuple[int, int] | None
        ウィンドウサイズ。None なら config の `window.size`。
    fps : float | None
        目標フレームレート。`<=0` でスロットリング無し。None なら config の `loop.fps`。
    config_path : str | Path | None
        明示する config.yaml のパス。

    Returns
    -------
    None
        ウィンドウが閉じられる（QuitEvent）か `ctx.exit()` が呼ばれると制御を返す。

    Raises
    ------
    SystemExit
        ウィンドウ生成失敗は終了コード 1、レンダラー生成失敗は 2。
    """

    validate_sketch(sketch)
    if config_path is not None:
        set_config_path(config_path)
    settings = WindowSettings.from_config(runtime_config(), title=title, size=size, fps=fps)

    _init_text_backend()

    window = None
    try:
        window = _create_window(settings)
        backend = _create_backend(window)
    except InitializationError as exc:
        _logger.error("%s", exc)
        if window is not None:
            _close_window(window)
        raise SystemExit(exc.exit_status) from exc

    ctx = SketchContext(backend, meter=FpsMeter(window=settings.fps_window))
    loop = FrameLoop(ctx, sketch, governor=FpsGovernor(settings.fps))
    try:
        setup = hook(sketch, SETUP)
        if setup is not None:
            setup(ctx)
        loop.run()
    finally:
        # 例外でも確実に後始末する。
        backend.close()
