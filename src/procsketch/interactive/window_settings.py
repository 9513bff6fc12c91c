# どこで: `src/procsketch/interactive/window_settings.py`。
# 何を: 描画ウィンドウの生成設定をまとめたデータクラスを定義する。
# なぜ: `run` の引数と config.yaml の値を 1 つの値へ束ね、ウィンドウ生成へ渡しやすくするため。

from __future__ import annotations

from dataclasses import dataclass

from procsketch.core.runtime_config import RuntimeConfig


@dataclass(frozen=True, slots=True)
class WindowSettings:
    """ウィンドウとフレームループの設定値の集合。"""

    title: str = "Debug view"
    size: tuple[int, int] = (640, 480)
    fps: float = 60.0
    fps_window: int = 100

    @classmethod
    def from_config(
        cls,
        cfg: RuntimeConfig,
        *,
        title: str | None = None,
        size: tuple[int, int] | None = None,
        fps: float | None = None,
    ) -> WindowSettings:
        """config の値に、明示された引数を上書きした設定を返す。"""

        w, h = size if size is not None else cfg.window_size
        if int(w) <= 0 or int(h) <= 0:
            raise ValueError(f"size は正の値である必要があります: got=({w}, {h})")
        return cls(
            title=str(title) if title is not None else cfg.window_title,
            size=(int(w), int(h)),
            fps=float(fps) if fps is not None else float(cfg.fps),
            fps_window=int(cfg.fps_window),
        )
