"""Prompt buffer - cursor editing over visible characters of markup text."""

from __future__ import annotations

from irctui.cursor import IndexMap, build_map, clamp
from irctui.markup import consume_markup


class PromptBuffer:
    """Raw prompt text plus a cursor counted in visible characters.

    Markers and their color arguments are invisible to the cursor: it can sit
    before or after them but never inside. Every operation rebuilds the index
    map from the current text.
    """

    def __init__(self, raw: str = "", cursor: int = 0) -> None:
        self._raw = raw
        self._cursor = clamp(cursor, build_map(raw))

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def cursor(self) -> int:
        return self._cursor

    def build_map(self) -> IndexMap:
        return build_map(self._raw)

    def set_value(self, raw: str) -> None:
        self._raw = raw
        self._cursor = len(build_map(raw))

    def clear(self) -> None:
        self._raw = ""
        self._cursor = 0

    # -- Editing -------------------------------------------------------------

    def insert(self, ch: str) -> None:
        index_map = build_map(self._raw)
        idx = index_map.offset_of(self._cursor)
        self._raw = self._raw[:idx] + ch + self._raw[idx:]
        # Buffer changed, map must be rebuilt before clamping
        new_map = build_map(self._raw)
        # A digit or comma after COLOR becomes its argument, not a visible char
        if len(new_map) > len(index_map):
            self._cursor += 1
        self._cursor = clamp(self._cursor, new_map)

    def insert_text(self, text: str) -> None:
        for ch in text:
            self.insert(ch)

    def delete(self) -> None:
        """Delete the visible character left of the cursor (backspace)."""
        if self._cursor == 0:
            return
        index_map = build_map(self._raw)
        end = index_map.offset_of(self._cursor)
        start = index_map.offset_of(self._cursor - 1)
        self._raw = self._raw[:start] + self._raw[end:]
        self.move_left(index_map)

        if self._cursor == 0:
            self._strip_leading_markup()

    def _strip_leading_markup(self) -> None:
        # A leading marker with the cursor at 0 has no visible anchor left
        token = consume_markup(self._raw, 0)
        if token is not None:
            self._raw = self._raw[token.end :]

    # -- Movement ------------------------------------------------------------

    def move_right(self, index_map: IndexMap | None = None) -> None:
        if index_map is None:
            index_map = build_map(self._raw)
        self._cursor = clamp(self._cursor + 1, index_map)

    def move_left(self, index_map: IndexMap | None = None) -> None:
        if index_map is None:
            index_map = build_map(self._raw)
        self._cursor = clamp(self._cursor - 1, index_map)

    def reset(self) -> None:
        self._cursor = 0

    def move_to_end(self) -> None:
        self._cursor = len(build_map(self._raw))
