"""PromptInput component - single-line markup-aware input with a sliding window."""

from __future__ import annotations

import logging
from typing import Callable

from irctui.keybindings import MARKUP_ACTIONS, get_prompt_keybindings
from irctui.prompt import PromptBuffer
from irctui.textstyle import Span
from irctui.theme import DEFAULT_PALETTE, Palette
from irctui.tui import CURSOR_MARKER
from irctui.utils import char_width, render_spans, visible_width
from irctui.viewport import slice_spans, window

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 100


class PromptInput:
    """Single-line prompt whose text may contain IRC markup.

    The cursor moves over visible characters only. Rendering shows the tail
    of the text that fits the width, so the cursor stays on screen while
    typing.
    """

    def __init__(self, palette: Palette = DEFAULT_PALETTE, prompt: str = "> ") -> None:
        self._buffer = PromptBuffer()
        self._palette = palette
        self._prompt = prompt

        self.on_submit: Callable[[str], None] | None = None

        # Focusable interface
        self.focused: bool = False

        # Most recent first
        self._history: list[str] = []
        self._history_index: int = -1

        self._last_color: tuple[str, str] | None = None

    @property
    def buffer(self) -> PromptBuffer:
        return self._buffer

    @property
    def last_color(self) -> tuple[str, str] | None:
        """``(fg, bg)`` codes of the last COLOR marker seen by the last render."""
        return self._last_color

    def get_value(self) -> str:
        return self._buffer.raw

    def set_value(self, value: str) -> None:
        self._buffer.set_value(value)

    # -- History -------------------------------------------------------------

    def add_to_history(self, text: str) -> None:
        if not text.strip():
            return
        # Don't add consecutive duplicates
        if self._history and self._history[0] == text:
            return
        self._history.insert(0, text)
        if len(self._history) > HISTORY_LIMIT:
            self._history.pop()

    def _navigate_history(self, direction: int) -> None:
        """direction: 1 (down) or -1 (up)."""
        if not self._history:
            return

        new_index = self._history_index - direction
        if new_index < -1 or new_index >= len(self._history):
            return

        self._history_index = new_index
        logger.debug("Prompt history index %d", new_index)
        if new_index == -1:
            self._buffer.clear()
        else:
            self._buffer.set_value(self._history[new_index])

    # -- Input ---------------------------------------------------------------

    def handle_input(self, data: str) -> None:
        kb = get_prompt_keybindings()

        if kb.matches(data, "submit"):
            self._submit()
            return

        if kb.matches(data, "deleteCharBackward"):
            self._buffer.delete()
            return

        if kb.matches(data, "cursorLeft"):
            self._buffer.move_left()
            return

        if kb.matches(data, "cursorRight"):
            self._buffer.move_right()
            return

        if kb.matches(data, "cursorLineStart"):
            self._buffer.reset()
            return

        if kb.matches(data, "cursorLineEnd"):
            self._buffer.move_to_end()
            return

        if kb.matches(data, "historyUp"):
            self._navigate_history(-1)
            return

        if kb.matches(data, "historyDown"):
            self._navigate_history(1)
            return

        for action, marker in MARKUP_ACTIONS.items():
            if kb.matches(data, action):
                self._buffer.insert(marker)
                return

        # Regular character input
        has_control = any(
            ord(ch) < 32 or ord(ch) == 0x7F or (0x80 <= ord(ch) <= 0x9F)
            for ch in data
        )
        if not has_control:
            self._buffer.insert_text(data)

    def _submit(self) -> None:
        raw = self._buffer.raw
        if not raw:
            return
        logger.debug("Prompt submitted (%d chars)", len(raw))
        if self.on_submit:
            self.on_submit(raw)
        self.add_to_history(raw)
        self._history_index = -1
        self._buffer.clear()

    # -- Rendering -----------------------------------------------------------

    def invalidate(self) -> None:
        pass

    def render(self, width: int) -> list[str]:
        available_width = width - visible_width(self._prompt)
        if available_width <= 0:
            return [self._prompt]

        raw = self._buffer.raw
        cursor = self._buffer.cursor
        index_map = self._buffer.build_map()

        # The cursor cell past the end of the text needs a column of its own
        budget = available_width - 1 if cursor == len(index_map) else available_width
        result = window(raw, budget, cursor, self._palette)
        self._last_color = result.last_color

        shown = sum(len(span.text) for span in result.spans)
        rel = max(cursor - result.start, 0)
        before = slice_spans(result.spans, 0, rel)
        at = slice_spans(result.spans, rel, 1)
        after = slice_spans(result.spans, rel + 1, shown)

        at_text = render_spans(at) if at else render_spans([Span(" ")])
        marker = CURSOR_MARKER if self.focused else ""
        text_with_cursor = (
            render_spans(before)
            + marker
            + f"\x1b[7m{at_text}\x1b[27m"
            + render_spans(after)
        )

        # Same per-scalar measure the window budget uses
        visual_length = sum(char_width(ch) for span in result.spans for ch in span.text)
        if not at:
            visual_length += 1
        padding = " " * max(0, available_width - visual_length)
        return [self._prompt + text_with_cursor + padding]
