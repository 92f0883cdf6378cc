"""Terminal text utilities: width measurement and ANSI rendering of spans.

Widths are measured on what the terminal will show, so IRC markup and ANSI
SGR sequences are ignored. Styled spans are turned into SGR-decorated strings
for the rendering layer.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable

import grapheme
import wcwidth as _wcwidth

from irctui.markup import NamedColor, strip_markup
from irctui.textstyle import Span, Style

# CSI SGR sequences and the APC cursor marker
_STRIP_RE = re.compile(r"\x1b\[[0-9;]*m|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)")

# C0 and C1 controls, DEL included
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")

SGR_RESET = "\x1b[0m"

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Character and grapheme width
# ---------------------------------------------------------------------------


def char_width(ch: str) -> int:
    """Display width of a single scalar: 0 for controls and combining marks."""
    cp = ord(ch)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    return max(_wcwidth.wcwidth(ch), 0)


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Emoji sequences (VS16, ZWJ, skin tones, flags) are two columns wide;
    anything else takes the width of its first scalar.
    """
    if not g:
        return 0
    if len(g) == 1:
        return char_width(g)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    if unicodedata.category(g[0]) in ("Mn", "Me", "Mc", "Cf"):
        return 0
    return char_width(g[0])


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Strips ANSI SGR sequences and IRC markup.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_markup(_STRIP_RE.sub("", text))
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


# ---------------------------------------------------------------------------
# ANSI rendering
# ---------------------------------------------------------------------------


def _color_params(color: NamedColor | tuple[int, int, int], background: bool) -> str:
    if isinstance(color, NamedColor):
        return str(color.value + 10 if background else color.value)
    r, g, b = color
    return f"{48 if background else 38};2;{r};{g};{b}"


def style_to_sgr(style: Style) -> str:
    """Return the SGR sequence that selects *style*, or ``""`` for plain."""
    params: list[str] = []
    if style.bold:
        params.append("1")
    if style.italic:
        params.append("3")
    if style.underline:
        params.append("4")
    if style.fg is not None:
        params.append(_color_params(style.fg, background=False))
    if style.bg is not None:
        params.append(_color_params(style.bg, background=True))
    if not params:
        return ""
    return f"\x1b[{';'.join(params)}m"


def render_span(span: Span) -> str:
    # Span text may come from the network; never pass terminal controls through
    text = _CONTROL_RE.sub("", span.text)
    sgr = style_to_sgr(span.style)
    if not sgr:
        return text
    return f"{sgr}{text}{SGR_RESET}"


def render_spans(spans: Iterable[Span]) -> str:
    """Concatenate *spans* into one ANSI string, each styled run reset after."""
    return "".join(render_span(span) for span in spans)
