# どこで: `src/procsketch/interactive/window.py`。
# 何を: スケッチ用の pyglet ウィンドウ生成を行う。
# なぜ: interactive 依存をこの層に閉じ込め、core をヘッドレスに保つため。

from __future__ import annotations

import logging

import pyglet
from pyglet.gl import Config
from pyglet.window import NoSuchConfigException, Window

from procsketch.core.errors import WindowCreationError
from procsketch.interactive.window_settings import WindowSettings

_logger = logging.getLogger(__name__)


def _window(settings: WindowSettings, config: Config | None) -> Window:
    w, h = settings.size
    return pyglet.window.Window(  # type: ignore[abstract]
        width=int(w),
        height=int(h),
        caption=str(settings.title),
        resizable=False,
        vsync=False,
        config=config,
    )


def create_window(settings: WindowSettings) -> Window:
    """設定に基づき描画ウィンドウを生成する。失敗時は WindowCreationError。"""

    # 線を滑らかにするため、まず MSAA 付きで試す。
    config = Config(double_buffer=True, sample_buffers=1, samples=4)  # type: ignore[abstract]
    try:
        return _window(settings, config)
    except NoSuchConfigException:
        _logger.info("MSAA config is not available; falling back to the default GL config")
    except Exception as exc:
        raise WindowCreationError(f"Failed to create window: {exc}") from exc

    try:
        return _window(settings, None)
    except Exception as exc:
        raise WindowCreationError(f"Failed to create window: {exc}") from exc
