from __future__ import annotations

from pathlib import Path

from kiosk import config
from kiosk.config import resolve_asset_dir, resolve_placeholder_font_path


def test_asset_dir_defaults_to_images(monkeypatch):
    monkeypatch.delenv("KIOSK_ASSET_DIR", raising=False)
    assert resolve_asset_dir() == Path("images")


def test_asset_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("KIOSK_ASSET_DIR", str(tmp_path))
    assert resolve_asset_dir() == tmp_path


def test_font_path_ignores_environment(monkeypatch, tmp_path):
    font = tmp_path / "custom.ttf"
    font.write_bytes(b"")
    monkeypatch.setenv("KIOSK_FONT_PATH", str(font))

    assert resolve_placeholder_font_path() != str(font)


def test_font_path_prefers_default_then_fallbacks(monkeypatch, tmp_path):
    fallback = tmp_path / "fallback.ttf"
    fallback.write_bytes(b"")
    monkeypatch.setattr(config, "PLACEHOLDER_FONT_PATH", str(tmp_path / "missing.ttf"))
    monkeypatch.setattr(config, "_FONT_FALLBACKS", (str(tmp_path / "gone.ttf"), str(fallback)))
    assert resolve_placeholder_font_path() == str(fallback)

    default = tmp_path / "default.ttf"
    default.write_bytes(b"")
    monkeypatch.setattr(config, "PLACEHOLDER_FONT_PATH", str(default))
    assert resolve_placeholder_font_path() == str(default)


def test_font_path_is_none_without_fonts(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "PLACEHOLDER_FONT_PATH", str(tmp_path / "missing.ttf"))
    monkeypatch.setattr(config, "_FONT_FALLBACKS", ())
    assert resolve_placeholder_font_path() is None
