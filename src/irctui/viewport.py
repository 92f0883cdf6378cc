"""Viewport windowing for the single-line prompt.

The prompt shows the right-anchored tail of its visible text that fits the
column budget, which is where the cursor sits while typing.
"""

from __future__ import annotations

from dataclasses import dataclass

from irctui.cursor import build_map, clamp
from irctui.textstyle import Span, Style, tokenize
from irctui.theme import Palette
from irctui.utils import char_width


@dataclass(frozen=True)
class PromptWindow:
    """Visible part of a prompt.

    ``start`` is the first visible-character index shown, ``cursor_offset`` the
    cursor's screen column relative to the window, and ``last_color`` the
    ``(fg, bg)`` codes of the last COLOR marker in the whole prompt.
    """

    spans: list[Span]
    cursor_offset: int
    start: int
    last_color: tuple[str, str] | None = None


def window_start(stripped: str, max_columns: int) -> int:
    """Index of the first char of the longest suffix of *stripped* that fits."""
    width = 0
    start = len(stripped)
    for i in range(len(stripped) - 1, -1, -1):
        w = char_width(stripped[i])
        if width + w > max_columns:
            break
        width += w
        start = i
    return start


def slice_spans(spans: list[Span], start: int, count: int) -> list[Span]:
    """Keep *count* visible characters of *spans* beginning at index *start*.

    Spans cut by the window boundary are split; each piece keeps its style.
    """
    result: list[Span] = []
    pos = 0
    needed = count
    for span in spans:
        if needed <= 0:
            break
        span_len = len(span.text)
        if pos + span_len <= start:
            pos += span_len
            continue
        start_in_span = max(start - pos, 0)
        n = min(needed, span_len - start_in_span)
        piece = span.text[start_in_span : start_in_span + n]
        if piece:
            result.append(Span(piece, span.style))
        needed -= n
        pos += span_len
    return result


def window(
    raw: str,
    max_columns: int,
    cursor_visible_index: int,
    palette: Palette,
    base_style: Style | None = None,
) -> PromptWindow:
    """Compute the styled spans and cursor column of a prompt in *max_columns*.

    *base_style* defaults to the palette text color.
    """
    if base_style is None:
        base_style = Style(fg=palette.text)

    index_map = build_map(raw)
    cursor = clamp(cursor_visible_index, index_map)
    stripped = index_map.visible_text()

    start = window_start(stripped, max(max_columns, 0))

    if cursor >= start:
        cursor_offset = sum(char_width(ch) for ch in stripped[start:cursor])
    else:
        cursor_offset = 0

    result = tokenize(raw, base_style, palette)
    spans = slice_spans(result.spans, start, len(stripped) - start)
    return PromptWindow(spans, cursor_offset, start, result.last_color)
