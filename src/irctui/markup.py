"""IRC inline markup alphabet: control markers, color codes, and consumption.

Every piece of code that needs to know how many scalars a marker occupies goes
through :func:`consume_markup`, so the cursor map and the style tokenizer always
agree on which ranges of a raw buffer are invisible.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

CTCP = "\x01"
BOLD = "\x02"
COLOR = "\x03"
RESET = "\x0f"
ITALIC = "\x1d"
UNDERLINE = "\x1f"

MARKERS = frozenset({CTCP, BOLD, COLOR, RESET, ITALIC, UNDERLINE})

# Foreground code used when COLOR is followed by something other than a digit
FALLBACK_FG = "14"
# Explicit "no color" code; resolves to the theme background
COLOR_NONE = "99"

_DIGITS = "0123456789"


# ---------------------------------------------------------------------------
# Color table
# ---------------------------------------------------------------------------


class NamedColor(Enum):
    """The sixteen terminal colors addressable by IRC color codes.

    Values are SGR foreground codes; add 10 for the background variant.
    """

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    DARK_GRAY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_CYAN = 96
    WHITE = 97


RGB = tuple[int, int, int]
Color = NamedColor | RGB

_TABLE_ORDER: list[tuple[str, NamedColor, str]] = [
    ("0", NamedColor.WHITE, "White"),
    ("1", NamedColor.BLACK, "Black"),
    ("2", NamedColor.BLUE, "Blue"),
    ("3", NamedColor.GREEN, "Green"),
    ("4", NamedColor.RED, "Red"),
    ("5", NamedColor.LIGHT_RED, "LightRed"),
    ("6", NamedColor.MAGENTA, "Magenta"),
    ("7", NamedColor.LIGHT_YELLOW, "LightYellow"),
    ("8", NamedColor.YELLOW, "Yellow"),
    ("9", NamedColor.LIGHT_GREEN, "LightGreen"),
    ("10", NamedColor.CYAN, "Cyan"),
    ("11", NamedColor.LIGHT_CYAN, "LightCyan"),
    ("12", NamedColor.LIGHT_BLUE, "LightBlue"),
    ("13", NamedColor.LIGHT_MAGENTA, "LightMagenta"),
    ("14", NamedColor.DARK_GRAY, "DarkGray"),
    ("15", NamedColor.GRAY, "Gray"),
]

COLOR_TABLE: dict[str, NamedColor] = {}
for _code, _color, _name in _TABLE_ORDER:
    COLOR_TABLE[_code] = _color
    if len(_code) == 1:
        COLOR_TABLE["0" + _code] = _color

# Rows shown by the color picker, in code order
COLOR_NAMES: list[str] = [
    f"{code} | 0{code} : {name}" if len(code) == 1 else f"{code} : {name}"
    for code, _color, name in _TABLE_ORDER
]
COLOR_NAMES.append(f"{COLOR_NONE} : None")


# ---------------------------------------------------------------------------
# Consumption
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MarkupToken:
    """One marker plus the arguments it consumed, as ``raw[start:end]``."""

    marker: str
    start: int
    end: int
    fg: str = ""
    bg: str = ""
    has_comma: bool = False


def _take_digits(raw: str, pos: int, limit: int = 2) -> int:
    end = pos
    while end < len(raw) and end - pos < limit and raw[end] in _DIGITS:
        end += 1
    return end


def consume_markup(raw: str, pos: int) -> MarkupToken | None:
    """Consume the marker at *pos* in *raw*, or return ``None`` for a visible char.

    ``COLOR`` takes up to two foreground digits, then optionally a comma and up
    to two background digits. A comma with nothing usable after it is still
    consumed. Truncated sequences never raise; they consume what matched.
    """
    if pos >= len(raw):
        return None
    ch = raw[pos]
    if ch not in MARKERS:
        return None
    if ch != COLOR:
        return MarkupToken(ch, pos, pos + 1)

    fg_end = _take_digits(raw, pos + 1)
    fg = raw[pos + 1 : fg_end]
    if fg_end < len(raw) and raw[fg_end] == ",":
        bg_end = _take_digits(raw, fg_end + 1)
        return MarkupToken(ch, pos, bg_end, fg, raw[fg_end + 1 : bg_end], True)
    return MarkupToken(ch, pos, fg_end, fg)


def iter_markup(raw: str):
    """Yield ``(index, token)`` pairs; *token* is ``None`` for visible chars."""
    i = 0
    while i < len(raw):
        token = consume_markup(raw, i)
        if token is None:
            yield i, None
            i += 1
        else:
            yield i, token
            i = token.end


def strip_markup(raw: str) -> str:
    """Return the visible text of *raw*: every marker and its arguments removed."""
    return "".join(raw[i] for i, token in iter_markup(raw) if token is None)
