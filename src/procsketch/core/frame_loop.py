# どこで: `src/procsketch/core/frame_loop.py`。
# 何を: イベント処理 → clear → draw → present → 待機、を繰り返すフレームループを提供する。
# なぜ: ループの状態遷移と fps 制御をバックエンドから独立させ、ヘッドレスでも同じ手順で回せるようにするため。

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Callable

from procsketch.core.context import SketchContext
from procsketch.core.events import EventDispatcher
from procsketch.core.fps import NANOS_PER_SECOND, FpsGovernor

_logger = logging.getLogger(__name__)


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class FrameLoop:
    """1 スレッドで回すフレームループ。

    Notes
    -----
    イベント処理は各フレームの draw より前に、同じスレッドで行う。
    そのため draw が参照する入力状態は、直前に取り出したイベントまで反映済みになる。
    `run()` を呼んだスレッドが以後ずっと描画を担当する。
    """

    def __init__(
        self,
        ctx: SketchContext,
        sketch: Any,
        *,
        governor: FpsGovernor | None = None,
        clock_ns: Callable[[], int] = time.perf_counter_ns,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._ctx = ctx
        self._sketch = sketch
        self._governor = governor if governor is not None else FpsGovernor()
        self._clock_ns = clock_ns
        self._sleep = sleep
        self._dispatcher = EventDispatcher(sketch, ctx, ctx.input)
        self._state = LoopState.IDLE

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is LoopState.RUNNING

    def stop(self) -> None:
        """ループを止める。現在のフレームは最後まで処理される。"""

        if self._state is not LoopState.STOPPED:
            _logger.debug("Frame loop stopping (state=%s)", self._state.value)
        self._state = LoopState.STOPPED

    def run_frame(self) -> bool:
        """1 フレーム分を処理し、ループを続けるなら True を返す。"""

        ctx = self._ctx
        backend = ctx.backend
        start_ns = self._clock_ns()

        # --- 1) 入力イベント ---
        if self._dispatcher.dispatch(backend.poll_events()) or ctx.exit_requested:
            self.stop()
            return False

        # --- 2) clear → draw → present ---
        backend.clear()
        self._sketch.draw(ctx)
        backend.present()
        ctx.meter.frame_presented()

        if ctx.exit_requested:
            self.stop()
            return False

        # --- 3) 目標 fps までの残り時間だけ待つ ---
        wait_ns = self._governor.sleep_ns(self._clock_ns() - start_ns)
        if wait_ns > 0:
            self._sleep(wait_ns / NANOS_PER_SECOND)
        return True

    def run(self) -> None:
        """QuitEvent または `stop()` までブロックしてループを回す。"""

        if self._state is not LoopState.IDLE:
            raise RuntimeError(f"FrameLoop は 1 度しか実行できません: state={self._state.value}")

        self._state = LoopState.RUNNING
        self._ctx.meter.start()
        _logger.debug("Frame loop started (target_fps=%s)", self._governor.target_fps)
        try:
            while self._state is LoopState.RUNNING:
                if not self.run_frame():
                    break
        finally:
            self._state = LoopState.STOPPED


__all__ = ["FrameLoop", "LoopState"]
