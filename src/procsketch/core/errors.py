# どこで: `src/procsketch/core/errors.py`。
# 何を: procsketch が送出する例外と、初期化失敗時の終了ステータスを定義する。
# なぜ: 「即時に致命」「呼び出し側へ返す」の区別を型で表し、終了コードを 1 箇所で管理するため。

from __future__ import annotations

EXIT_OK = 0
EXIT_WINDOW_CREATION_FAILED = 1
EXIT_RENDERER_CREATION_FAILED = 2


class ProcsketchError(Exception):
    """procsketch の例外の基底クラス。"""


class ResourceLoadError(ProcsketchError):
    """フォント/画像の読み込みに失敗した場合に送出される例外。"""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = str(path)


class FontLoadError(ResourceLoadError):
    """フォントを開けなかった場合に送出される例外。"""


class ImageLoadError(ResourceLoadError):
    """画像をデコードできなかった場合に送出される例外。"""


class ResourceReleasedError(ProcsketchError):
    """解放済みリソースを使おうとした場合に送出される例外。"""


class FontNotSetError(ProcsketchError):
    """現在のフォントが未設定のまま text() を呼んだ場合に送出される例外。"""


class StateStackUnderflowError(ProcsketchError):
    """既定状態しか残っていないスタックを pop した場合に送出される例外。"""


class TextRenderError(ProcsketchError):
    """バックエンドが文字列をラスタライズできなかった場合に送出される例外。"""


class InitializationError(ProcsketchError):
    """ウィンドウ/レンダラー生成の失敗。`exit_status` でプロセスの終了コードを表す。"""

    exit_status: int = 1


class WindowCreationError(InitializationError):
    """ウィンドウを生成できなかった場合に送出される例外。"""

    exit_status = EXIT_WINDOW_CREATION_FAILED


class RendererCreationError(InitializationError):
    """レンダラー（GL コンテキスト）を生成できなかった場合に送出される例外。"""

    exit_status = EXIT_RENDERER_CREATION_FAILED


__all__ = [
    "EXIT_OK",
    "EXIT_RENDERER_CREATION_FAILED",
    "EXIT_WINDOW_CREATION_FAILED",
    "FontLoadError",
    "FontNotSetError",
    "ImageLoadError",
    "InitializationError",
    "ProcsketchError",
    "RendererCreationError",
    "ResourceLoadError",
    "ResourceReleasedError",
    "StateStackUnderflowError",
    "TextRenderError",
    "WindowCreationError",
]
