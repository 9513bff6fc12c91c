# どこで: `src/procsketch/core/fps.py`。
# 何を: 目標 fps に合わせた待ち時間の算出（FpsGovernor）と、実測 fps の推定（FpsMeter）を提供する。
# なぜ: フレームループから時間計算を切り離し、時計を差し替えてテストできるようにするため。

from __future__ import annotations

import logging
import time
from typing import Callable

_logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000
DEFAULT_FPS = 60.0
DEFAULT_FPS_WINDOW = 100


class FpsGovernor:
    """経過時間を差し引いた待ち時間で、フレームレートを目標値以下に抑える。

    Notes
    -----
    `target_fps <= 0` はスロットリング無し（待ち時間は常に 0）。
    """

    def __init__(self, target_fps: float = DEFAULT_FPS) -> None:
        self._target_fps = float(target_fps)

    @property
    def target_fps(self) -> float:
        return float(self._target_fps)

    @property
    def frame_budget_ns(self) -> int:
        """1 フレームあたりの持ち時間（ns）。スロットリング無しなら 0。"""

        if self._target_fps <= 0:
            return 0
        return int(NANOS_PER_SECOND / self._target_fps)

    def sleep_ns(self, elapsed_ns: int) -> int:
        """このフレームで描画に `elapsed_ns` かかったとき、残り待つべき時間（ns）を返す。"""

        return max(0, self.frame_budget_ns - int(elapsed_ns))


class FpsMeter:
    """`window` フレームごとに実測 fps を再計算する。

    Notes
    -----
    再計算の合間は前回の値を返し続ける。最初の再計算までは 0。
    """

    def __init__(
        self,
        *,
        window: int = DEFAULT_FPS_WINDOW,
        clock_ns: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        if int(window) <= 0:
            raise ValueError(f"window は正の値である必要があります: got={window!r}")
        self._window = int(window)
        self._clock_ns = clock_ns
        self._fps = 0
        self._frames = 0
        self._total_frames = 0
        self._start_ns: int | None = None

    @property
    def fps(self) -> int:
        """直近の推定 fps を返す。"""

        return int(self._fps)

    @property
    def total_frames(self) -> int:
        """これまでに present されたフレーム数を返す。"""

        return int(self._total_frames)

    def start(self) -> None:
        """計測区間を開始する。"""

        self._frames = 0
        self._start_ns = self._clock_ns()

    def frame_presented(self) -> None:
        """1 フレーム present されたことを記録する。"""

        if self._start_ns is None:
            self.start()
        self._frames += 1
        self._total_frames += 1
        if self._frames < self._window:
            return

        now = self._clock_ns()
        elapsed_ns = now - int(self._start_ns)  # type: ignore[arg-type]
        if elapsed_ns > 0:
            self._fps = int(self._frames * NANOS_PER_SECOND / elapsed_ns)
        _logger.debug("fps=%d (%d frames / %.3fs)", self._fps, self._frames, elapsed_ns / 1e9)
        self._frames = 0
        self._start_ns = now


__all__ = ["DEFAULT_FPS", "DEFAULT_FPS_WINDOW", "FpsGovernor", "FpsMeter"]
