"""ChatView component - wrapped, styled channel history with scrollback."""

from __future__ import annotations

from dataclasses import dataclass

from irctui.chat import wrap_message
from irctui.theme import DEFAULT_PALETTE, Palette
from irctui.utils import render_spans


@dataclass(frozen=True)
class ChatLine:
    sender: str
    body: str


class ChatView:
    """History of one channel, rendered bottom-up.

    ``scroll_offset`` counts display lines hidden below the visible area;
    0 means the newest line is at the bottom.
    """

    def __init__(self, palette: Palette = DEFAULT_PALETTE, page_size: int = 10) -> None:
        self._palette = palette
        self._page_size = page_size
        self._lines: list[ChatLine] = []
        self._scroll_offset = 0
        self._last_total = 0
        self._last_height: int | None = None

    @property
    def lines(self) -> list[ChatLine]:
        return list(self._lines)

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    def append(self, sender: str, body: str) -> None:
        self._lines.append(ChatLine(sender, body))

    def clear(self) -> None:
        self._lines.clear()
        self._scroll_offset = 0

    def scroll_up(self, amount: int | None = None) -> None:
        step = self._page_size if amount is None else amount
        self._scroll_offset = self._clamp_offset(self._scroll_offset + step)

    def scroll_down(self, amount: int | None = None) -> None:
        step = self._page_size if amount is None else amount
        self._scroll_offset = self._clamp_offset(self._scroll_offset - step)

    def _clamp_offset(self, offset: int) -> int:
        # Bounds come from the last render; before one there is nothing to scroll
        visible = self._last_total if self._last_height is None else self._last_height
        max_offset = max(self._last_total - visible, 0)
        return max(0, min(offset, max_offset))

    def invalidate(self) -> None:
        pass

    def render(self, width: int, height: int | None = None) -> list[str]:
        rendered: list[str] = []
        for line in self._lines:
            for spans in wrap_message(line.sender, line.body, width, self._palette):
                rendered.append(render_spans(spans))

        self._last_total = len(rendered)
        self._last_height = height
        self._scroll_offset = self._clamp_offset(self._scroll_offset)

        end = len(rendered) - self._scroll_offset
        if height is None:
            return rendered[:end]
        return rendered[max(end - height, 0) : end]
