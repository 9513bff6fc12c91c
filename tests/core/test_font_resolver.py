from __future__ import annotations

from pathlib import Path

import pytest

from procsketch.core.font_resolver import clear_font_cache, resolve_font_path
from procsketch.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _isolate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    clear_font_cache()
    yield
    set_config_path(None)
    clear_font_cache()


def _config_with_font_dir(tmp_path: Path, font_dir: Path) -> Path:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "\n".join(["paths:", "  font_dirs:", f'    - "{font_dir}"', ""]),
        encoding="utf-8",
    )
    return cfg_path


def test_direct_path_wins(tmp_path: Path) -> None:
    p = tmp_path / "Direct.ttf"
    p.write_bytes(b"x")
    assert resolve_font_path(str(p)) == p.resolve()


def test_name_is_resolved_inside_font_dirs(tmp_path: Path) -> None:
    font_dir = tmp_path / "fonts"
    (font_dir / "nested").mkdir(parents=True)
    exact = font_dir / "Exact.ttf"
    exact.write_bytes(b"x")
    nested = font_dir / "nested" / "Noto Sans Mono-Regular.otf"
    nested.write_bytes(b"x")

    set_config_path(_config_with_font_dir(tmp_path, font_dir))

    assert resolve_font_path("Exact.ttf") == exact.resolve()
    # 部分一致は大文字小文字/空白を無視する
    assert resolve_font_path("notosansmono") == nested.resolve()


def test_missing_font_error_contains_hints(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError) as excinfo:
        resolve_font_path("___no_such_font___")
    msg = str(excinfo.value)
    assert "searched_dirs=" in msg
    assert "font_dirs:" in msg


def test_empty_name_raises() -> None:
    with pytest.raises(FileNotFoundError):
        resolve_font_path("   ")
