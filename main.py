"""
どこで: リポジトリ直下 `main.py`。
何を: 矩形/線/文字を描く簡単なスケッチを定義し、run でプレビュー表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

from procsketch import ALIGN_LEFT, KEY_SPACE, hex_color, rgb, run
from procsketch.api import FontLoadError

CANVAS_WIDTH = 400
CANVAS_HEIGHT = 300


class Demo:
    def __init__(self) -> None:
        self.size = 20
        self.has_font = False

    def setup(self, p):
        p.title("procsketch demo")
        try:
            p.set_font(p.create_font("DejaVuSans", 14))
            self.has_font = True
        except FontLoadError as exc:
            print(exc)

    def draw(self, p):
        p.background(hex_color(0x202830))

        p.push()
        p.translate(p.mouse_x, p.mouse_y)
        p.fill(rgb(240, 120, 40))
        p.rect(-self.size // 2, -self.size // 2, self.size, self.size)
        p.pop()

        p.stroke(hex_color(0x8899AA))
        p.line(p.pmouse_x, p.pmouse_y, p.mouse_x, p.mouse_y)

        if self.has_font:
            p.fill(hex_color(0xFFFFFF))
            p.text_align(ALIGN_LEFT)
            p.text(f"fps: {p.fps}", 8, 8, 0, 0)

    def key_pressed(self, p):
        if p.key == KEY_SPACE:
            self.size = 60 if self.size == 20 else 20

    def mouse_clicked(self, p):
        print(f"clicked at ({p.mouse_x}, {p.mouse_y})")


if __name__ == "__main__":
    run(Demo(), size=(CANVAS_WIDTH, CANVAS_HEIGHT), fps=60)
