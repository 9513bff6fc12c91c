# どこで: `src/procsketch/core/context.py`。
# 何を: スケッチの各フックへ渡す実行コンテキスト（描画 API + 入力状態 + ウィンドウ操作 + fps）を提供する。
# なぜ: ウィンドウ/状態/入力をグローバル変数にせず、1 つのオブジェクトへ束ねて明示的に受け渡すため。

from __future__ import annotations

from pathlib import Path

from procsketch.core.backend import RenderBackend
from procsketch.core.canvas import Canvas
from procsketch.core.events import InputState
from procsketch.core.fps import FpsMeter
from procsketch.core.resources import Font, Image, create_font, load_image


class SketchContext(Canvas):
    """Processing 風の描画 API。

    Examples
    --------
    ::

        class Hello:
            def draw(self, p):
                p.background(hex_color(0x202020))
                p.rect(p.mouse_x, p.mouse_y, 10, 10)
    """

    def __init__(
        self,
        backend: RenderBackend,
        *,
        meter: FpsMeter | None = None,
        input_state: InputState | None = None,
    ) -> None:
        super().__init__(backend)
        self.input = input_state if input_state is not None else InputState()
        self.meter = meter if meter is not None else FpsMeter()
        self._exit_requested = False

    # --- 入力（読み取り専用） ---

    @property
    def key(self) -> int:
        """最後に押されたキーのシンボル値。"""

        return self.input.key

    @property
    def mouse_x(self) -> int:
        return self.input.mouse_x

    @property
    def mouse_y(self) -> int:
        return self.input.mouse_y

    @property
    def pmouse_x(self) -> int:
        """1 つ前のマウス X 座標。"""

        return self.input.pmouse_x

    @property
    def pmouse_y(self) -> int:
        return self.input.pmouse_y

    # --- ループ ---

    @property
    def fps(self) -> int:
        """実測 fps（100 フレームごとに更新）。"""

        return self.meter.fps

    @property
    def frame_count(self) -> int:
        return self.meter.total_frames

    @property
    def exit_requested(self) -> bool:
        return self._exit_requested

    def exit(self) -> None:
        """現在のフレームの後でループを止める。"""

        self._exit_requested = True

    # --- ウィンドウ ---

    @property
    def width(self) -> int:
        return int(self.backend.window_size()[0])

    @property
    def height(self) -> int:
        return int(self.backend.window_size()[1])

    def title(self, title: str) -> None:
        """ウィンドウタイトルを即時に変更する。"""

        self.backend.set_title(str(title))

    def size(self, width: int, height: int) -> None:
        """ウィンドウサイズを即時に変更する。"""

        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"ウィンドウサイズは正の値である必要があります: got=({width}, {height})")
        self.backend.set_size(int(width), int(height))

    # --- リソース ---

    def create_font(self, font: str | Path, size: int) -> Font:
        """フォントを開く。失敗時は FontLoadError。"""

        return create_font(self.backend, font, size)

    def load_image(self, path: str | Path) -> Image:
        """画像を読み込む。失敗時は ImageLoadError。"""

        return load_image(self, path)


__all__ = ["SketchContext"]
