# どこで: `src/procsketch/core/font_resolver.py`。
# 何を: `create_font(font, size)` の `font` 指定を実体ファイルへ解決する。
# なぜ: 実在パスだけでなく、config の `font_dirs` に置いたフォントを名前で指定できるようにするため。

from __future__ import annotations

from pathlib import Path

from procsketch.core.runtime_config import runtime_config

_FONT_EXTENSIONS = (".ttf", ".otf", ".ttc")
_FONT_FILES_CACHE: dict[tuple[str, ...], tuple[Path, ...]] = {}


def _search_dirs() -> tuple[Path, ...]:
    cfg = runtime_config()
    return tuple(Path(d).expanduser() for d in cfg.font_dirs)


def _list_font_files(*, dirs: tuple[Path, ...]) -> tuple[Path, ...]:
    key = tuple(str(d) for d in dirs)
    cached = _FONT_FILES_CACHE.get(key)
    if cached is not None:
        return cached

    seen: list[Path] = []
    for root in dirs:
        if not root.is_dir():
            continue
        for ext in _FONT_EXTENSIONS:
            for fp in root.glob(f"**/*{ext}"):
                resolved = fp.resolve()
                if resolved.is_file():
                    seen.append(resolved)

    out = tuple(sorted(set(seen)))
    _FONT_FILES_CACHE[key] = out
    return out


def clear_font_cache() -> None:
    """フォントファイル一覧のキャッシュを破棄する。"""

    _FONT_FILES_CACHE.clear()


def resolve_font_path(font: str) -> Path:
    """`font` 指定を実体ファイルへ解決して返す。見つからなければ FileNotFoundError。"""

    raw = str(font).strip()
    if not raw:
        raise FileNotFoundError("フォントが指定されていません（空文字列）")

    # 0) 直接パス（絶対/相対）を許容
    direct_path = Path(raw).expanduser()
    if direct_path.is_file():
        return direct_path.resolve()

    # 1) 探索ディレクトリ直下のファイル名一致
    dirs = _search_dirs()
    for d in dirs:
        fp = d / raw
        if fp.is_file():
            return fp.resolve()

    # 2) 部分一致（安定順: ファイルパスの安定ソート）
    files = _list_font_files(dirs=dirs)
    key = raw.lower().replace(" ", "")
    for fp in files:
        name = fp.name.lower().replace(" ", "")
        stem = fp.stem.lower().replace(" ", "")
        if key in name or key in stem:
            return fp

    searched = ", ".join(str(d) for d in dirs) if dirs else "(none)"
    cfg = runtime_config()
    example_yaml = "paths:\n  font_dirs:\n    - \"~/Fonts\"\n"
    hint = (
        f"フォントが見つかりません: {raw!r}。"
        " 実在パスを渡すか、config.yaml の `paths.font_dirs` を設定してください"
        "（例: ./.procsketch/config.yaml または ~/.config/procsketch/config.yaml）。"
        f"\n\n{example_yaml}\nsearched_dirs={searched}, config_path={cfg.config_path}"
    )
    raise FileNotFoundError(hint)


__all__ = ["clear_font_cache", "resolve_font_path"]
