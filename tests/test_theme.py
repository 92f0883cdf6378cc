"""Tests for irctui.theme -- palette defaults and config loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from irctui.theme import (
    CONFIG_ENV_VAR,
    DEFAULT_PALETTE,
    ConfigError,
    Palette,
    config_path,
    load_palette,
    palette_from_dict,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


class TestDefaults:
    def test_default_slots(self) -> None:
        assert DEFAULT_PALETTE.fg == (255, 238, 140)
        assert DEFAULT_PALETTE.bg == (47, 50, 54)
        assert DEFAULT_PALETTE.notification == (140, 255, 238)
        assert DEFAULT_PALETTE.highlight == (238, 140, 255)
        assert DEFAULT_PALETTE.text == (255, 255, 255)


class TestLoadPalette:
    """load_palette reads the [theme] table and falls back per slot."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_palette(tmp_path / "nope.toml") == DEFAULT_PALETTE

    def test_missing_table_gives_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[server]\nhost = "irc.example.org"\n')
        assert load_palette(path) == DEFAULT_PALETTE

    def test_full_theme(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "[theme]\n"
            "fg = [1, 2, 3]\n"
            "bg = [4, 5, 6]\n"
            "notification = [7, 8, 9]\n"
            "highlight = [10, 11, 12]\n"
            "text = [13, 14, 15]\n",
        )
        assert load_palette(path) == Palette(
            fg=(1, 2, 3),
            bg=(4, 5, 6),
            notification=(7, 8, 9),
            highlight=(10, 11, 12),
            text=(13, 14, 15),
        )

    def test_partial_theme_keeps_other_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[theme]\nbg = [0, 0, 0]\n")
        palette = load_palette(path)
        assert palette.bg == (0, 0, 0)
        assert palette.text == DEFAULT_PALETTE.text

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[theme\nbg = ")
        with pytest.raises(ConfigError):
            load_palette(path)

    def test_env_var_overrides_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = _write(tmp_path, "[theme]\ntext = [9, 9, 9]\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert config_path() == path
        assert load_palette().text == (9, 9, 9)


class TestPaletteFromDict:
    """Malformed slots fall back to their defaults with a warning."""

    @pytest.mark.parametrize(
        "value",
        [[1, 2], [1, 2, 3, 4], [0, 0, 256], [-1, 0, 0], "red", [True, 0, 0], [1.0, 2, 3]],
    )
    def test_malformed_slot(self, value: object, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="irctui.theme"):
            palette = palette_from_dict({"highlight": value})
        assert palette.highlight == DEFAULT_PALETTE.highlight
        assert "highlight" in caplog.text

    def test_unknown_keys_ignored(self) -> None:
        assert palette_from_dict({"sparkline": [1, 2, 3]}) == DEFAULT_PALETTE
