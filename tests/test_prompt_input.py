"""Tests for the PromptInput component."""

from __future__ import annotations

import re

from irctui.components.prompt_input import HISTORY_LIMIT, PromptInput
from irctui.markup import BOLD, COLOR
from irctui.tui import CURSOR_MARKER
from irctui.utils import visible_width

# Raw escape codes for key sequences
KEY_UP = "\x1b[A"
KEY_DOWN = "\x1b[B"
KEY_LEFT = "\x1b[D"
KEY_RIGHT = "\x1b[C"
KEY_HOME = "\x1b[H"
KEY_END = "\x1b[F"
KEY_ENTER = "\r"
KEY_BACKSPACE = "\x7f"
CTRL_B = "\x02"
CTRL_K = "\x0b"
CTRL_N = "\x0e"

_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def _plain(line: str) -> str:
    return _SGR_RE.sub("", line.replace(CURSOR_MARKER, ""))


class TestEditing:
    """Keys map onto visible-character editing of the raw buffer."""

    def test_typing(self) -> None:
        inp = PromptInput()
        inp.handle_input("h")
        inp.handle_input("i")
        assert inp.get_value() == "hi"
        assert inp.buffer.cursor == 2

    def test_pasted_string(self) -> None:
        inp = PromptInput()
        inp.handle_input("hello")
        assert inp.get_value() == "hello"

    def test_control_data_ignored(self) -> None:
        inp = PromptInput()
        inp.handle_input("\x1b[3;5~")
        assert inp.get_value() == ""

    def test_markup_keys_insert_markers(self) -> None:
        inp = PromptInput()
        inp.handle_input(CTRL_B)
        inp.handle_input("hi")
        inp.handle_input(CTRL_K)
        inp.handle_input("4")
        inp.handle_input("x")
        inp.handle_input(CTRL_N)
        assert inp.get_value() == f"{BOLD}hi{COLOR}4x\x0f"
        assert inp.buffer.cursor == 3

    def test_cursor_keys_skip_markup(self) -> None:
        inp = PromptInput()
        inp.set_value(f"a{COLOR}04,12b")
        inp.handle_input(KEY_LEFT)
        inp.handle_input("x")
        assert inp.get_value() == f"a{COLOR}04,12xb"

    def test_home_end(self) -> None:
        inp = PromptInput()
        inp.handle_input("abc")
        inp.handle_input(KEY_HOME)
        assert inp.buffer.cursor == 0
        inp.handle_input(KEY_RIGHT)
        assert inp.buffer.cursor == 1
        inp.handle_input(KEY_END)
        assert inp.buffer.cursor == 3

    def test_backspace_compacts_leading_markup(self) -> None:
        inp = PromptInput()
        inp.handle_input(CTRL_B)
        inp.handle_input("A")
        inp.handle_input(KEY_BACKSPACE)
        assert inp.get_value() == ""


class TestSubmitAndHistory:
    """Enter submits the raw text; up/down cycle previous prompts."""

    def test_submit_passes_raw_and_clears(self) -> None:
        submitted: list[str] = []
        inp = PromptInput()
        inp.on_submit = submitted.append
        inp.handle_input(CTRL_B)
        inp.handle_input("hi")
        inp.handle_input(KEY_ENTER)
        assert submitted == [f"{BOLD}hi"]
        assert inp.get_value() == ""
        assert inp.buffer.cursor == 0

    def test_empty_submit_ignored(self) -> None:
        submitted: list[str] = []
        inp = PromptInput()
        inp.on_submit = submitted.append
        inp.handle_input(KEY_ENTER)
        assert submitted == []

    def test_history_navigation(self) -> None:
        inp = PromptInput()
        for text in ["first", "second"]:
            inp.handle_input(text)
            inp.handle_input(KEY_ENTER)
        inp.handle_input(KEY_UP)
        assert inp.get_value() == "second"
        assert inp.buffer.cursor == 6
        inp.handle_input(KEY_UP)
        assert inp.get_value() == "first"
        inp.handle_input(KEY_UP)
        assert inp.get_value() == "first"
        inp.handle_input(KEY_DOWN)
        assert inp.get_value() == "second"
        inp.handle_input(KEY_DOWN)
        assert inp.get_value() == ""

    def test_no_consecutive_duplicates(self) -> None:
        inp = PromptInput()
        inp.add_to_history("same")
        inp.add_to_history("same")
        inp.handle_input(KEY_UP)
        inp.handle_input(KEY_UP)
        assert inp.get_value() == "same"
        inp.handle_input(KEY_DOWN)
        assert inp.get_value() == ""

    def test_history_is_capped(self) -> None:
        inp = PromptInput()
        for i in range(HISTORY_LIMIT + 5):
            inp.add_to_history(f"line {i}")
        for _ in range(HISTORY_LIMIT + 10):
            inp.handle_input(KEY_UP)
        assert inp.get_value() == "line 5"


class TestRender:
    """render draws the windowed prompt with a reverse-video cursor."""

    def test_empty_render(self) -> None:
        inp = PromptInput()
        lines = inp.render(20)
        assert len(lines) == 1
        assert lines[0].startswith("> ")
        assert "\x1b[7m" in lines[0]
        assert "\x1b[27m" in lines[0]
        assert visible_width(lines[0]) == 20

    def test_text_render_width(self) -> None:
        inp = PromptInput()
        inp.handle_input("hello")
        line = inp.render(20)[0]
        assert _plain(line).startswith("> hello ")
        assert visible_width(line) == 20

    def test_markup_not_drawn(self) -> None:
        inp = PromptInput()
        inp.set_value(f"{BOLD}bold{BOLD} {COLOR}4red")
        line = inp.render(30)[0]
        assert _plain(line).rstrip() == "> bold red"
        assert "\x02" not in line
        assert "\x03" not in line

    def test_long_text_scrolls(self) -> None:
        inp = PromptInput()
        inp.handle_input("abcdefghijklmnopqrstuvwxyz0123")
        line = inp.render(12)[0]
        assert _plain(line) == "> vwxyz0123 "

    def test_cursor_cell_in_middle(self) -> None:
        inp = PromptInput()
        inp.handle_input("abc")
        inp.handle_input(KEY_LEFT)
        line = inp.render(10)[0]
        assert "\x1b[7m" in line
        reversed_cell = line.split("\x1b[7m", 1)[1].split("\x1b[27m", 1)[0]
        assert _plain(reversed_cell) == "c"

    def test_focused_emits_cursor_marker(self) -> None:
        inp = PromptInput()
        assert CURSOR_MARKER not in inp.render(20)[0]
        inp.focused = True
        assert CURSOR_MARKER in inp.render(20)[0]

    def test_last_color_from_render(self) -> None:
        inp = PromptInput()
        assert inp.last_color is None
        inp.set_value(f"{COLOR}4,12x")
        inp.render(20)
        assert inp.last_color == ("4", "12")

    def test_padding_uses_window_width_measure(self) -> None:
        inp = PromptInput()
        inp.handle_input("\U0001F44D\U0001F3FD")
        line = inp.render(12)[0]
        # Both scalars count two columns in the window: four text columns, the
        # cursor cell, then five columns of padding
        assert _plain(line) == "> \U0001F44D\U0001F3FD" + " " * 6

    def test_tiny_width(self) -> None:
        inp = PromptInput()
        inp.handle_input("abc")
        assert inp.render(2) == ["> "]
