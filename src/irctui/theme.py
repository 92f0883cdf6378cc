"""Theme palette and its loading from the user config file.

The config file is TOML; only its ``[theme]`` table is read here::

    [theme]
    fg = [255, 238, 140]
    bg = [47, 50, 54]
    notification = [140, 255, 238]
    highlight = [238, 140, 255]
    text = [255, 255, 255]

Each slot falls back to its default independently when absent or malformed.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from irctui.markup import RGB

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "IRCTUI_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "irctui" / "config.toml"


class ConfigError(Exception):
    """The config file exists but could not be read or parsed."""


@dataclass(frozen=True)
class Palette:
    """The five theme colors used for borders, fallbacks, and labels."""

    fg: RGB = (255, 238, 140)
    bg: RGB = (47, 50, 54)
    notification: RGB = (140, 255, 238)
    highlight: RGB = (238, 140, 255)
    text: RGB = (255, 255, 255)


DEFAULT_PALETTE = Palette()


def config_path() -> Path:
    """Return the config path, honouring ``$IRCTUI_CONFIG``."""
    override = os.getenv(CONFIG_ENV_VAR, "")
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def _parse_rgb(value: Any) -> RGB | None:
    if not isinstance(value, list) or len(value) != 3:
        return None
    for channel in value:
        # bool is an int subclass; reject it explicitly
        if isinstance(channel, bool) or not isinstance(channel, int):
            return None
        if not 0 <= channel <= 255:
            return None
    return (value[0], value[1], value[2])


def palette_from_dict(theme: dict[str, Any]) -> Palette:
    """Build a :class:`Palette` from a ``[theme]`` table, slot by slot."""
    values: dict[str, RGB] = {}
    for f in fields(Palette):
        if f.name not in theme:
            continue
        rgb = _parse_rgb(theme[f.name])
        if rgb is None:
            logger.warning(
                "Invalid theme color %r for %s, using default", theme[f.name], f.name
            )
            continue
        values[f.name] = rgb
    return Palette(**values)


def load_palette(path: Path | str | None = None) -> Palette:
    """Load the theme palette from *path* (or :func:`config_path`).

    A missing file or a file without a ``[theme]`` table yields the default
    palette. Unreadable or invalid TOML raises :class:`ConfigError`.
    """
    target = Path(path) if path is not None else config_path()
    if not target.exists():
        logger.debug("No config file at %s, using default theme", target)
        return DEFAULT_PALETTE

    try:
        with target.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to load config {target}: {exc}") from exc

    theme = data.get("theme")
    if not isinstance(theme, dict):
        logger.debug("Config %s has no [theme] table", target)
        return DEFAULT_PALETTE

    logger.debug("Loaded theme from %s", target)
    return palette_from_dict(theme)
