"""Raw/visible index map for markup-laden prompt text.

The cursor of a prompt is always a *visible* character index. This module maps
such indices back to raw offsets so edits land between visible characters and
never inside a marker or its color arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from irctui.markup import iter_markup


@dataclass(frozen=True)
class IndexMap:
    """Visible index -> raw offset lookup for one raw buffer.

    ``offsets[i]`` is the ``str`` index of the i-th visible character in
    ``raw``. The map is derived data: rebuild it after every edit.
    """

    raw: str
    offsets: tuple[int, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.offsets)

    def offset_of(self, visible_index: int) -> int:
        """Raw offset of *visible_index*, or ``len(raw)`` when out of range."""
        if 0 <= visible_index < len(self.offsets):
            return self.offsets[visible_index]
        return len(self.raw)

    def byte_offset_of(self, visible_index: int) -> int:
        """Same position as :meth:`offset_of`, expressed in UTF-8 bytes."""
        return len(self.raw[: self.offset_of(visible_index)].encode("utf-8"))

    def visible_text(self) -> str:
        return "".join(self.raw[i] for i in self.offsets)


def build_map(raw: str) -> IndexMap:
    """Scan *raw* once and record the offset of every visible character."""
    offsets = tuple(i for i, token in iter_markup(raw) if token is None)
    return IndexMap(raw, offsets)


def clamp(candidate: int, index_map: IndexMap) -> int:
    """Clamp a signed cursor candidate into ``[0, len(index_map)]``."""
    return max(0, min(candidate, len(index_map)))
