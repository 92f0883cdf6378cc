"""ColorPicker component - the IRC color code list with a highlighted row."""

from __future__ import annotations

from typing import Literal

from irctui.markup import COLOR_NAMES
from irctui.textstyle import color_selector

ColorChannel = Literal["fg", "bg"]


class ColorPicker:
    """Lists the color codes a COLOR marker accepts.

    The selected row follows the last color code typed into the prompt, so
    the user sees which color the code under construction refers to.
    """

    def __init__(self, channel: ColorChannel = "fg") -> None:
        self.channel: ColorChannel = channel
        self._selected_index = 0

    @property
    def selected_index(self) -> int:
        return self._selected_index

    def select_code(self, code: str) -> None:
        self._selected_index = color_selector(code)

    def select_from(self, last_color: tuple[str, str] | None) -> None:
        """Follow the ``(fg, bg)`` codes reported by a prompt render."""
        if last_color is None:
            self._selected_index = 0
            return
        fg, bg = last_color
        self.select_code(fg if self.channel == "fg" else bg)

    def invalidate(self) -> None:
        pass

    def render(self, width: int) -> list[str]:
        title = "Foreground" if self.channel == "fg" else "Background"
        lines = [title[:width]]
        for i, name in enumerate(COLOR_NAMES):
            prefix = "→ " if i == self._selected_index else "  "
            line = (prefix + name)[:width]
            if i == self._selected_index:
                line = f"\x1b[7m{line}\x1b[27m"
            lines.append(line)
        return lines
