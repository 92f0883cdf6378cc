"""Style tokenizer - folds IRC markup into styled text spans.

The tokenizer is a pure function: instead of notifying a caller about color
codes while scanning, it reports them in the returned :class:`TokenizeResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from irctui.markup import (
    BOLD,
    COLOR,
    COLOR_NAMES,
    COLOR_NONE,
    COLOR_TABLE,
    FALLBACK_FG,
    ITALIC,
    RESET,
    UNDERLINE,
    Color,
    consume_markup,
)
from irctui.theme import Palette


@dataclass(frozen=True)
class Style:
    """A fully resolved style. ``None`` colors mean "terminal default"."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False


@dataclass(frozen=True)
class Span:
    text: str
    style: Style = field(default_factory=Style)


@dataclass
class StyleState:
    """Modifier toggles flipped by BOLD, ITALIC and UNDERLINE markers."""

    bold: bool = False
    italic: bool = False
    underline: bool = False

    def apply(self, base: Style) -> Style:
        # Toggles only add modifiers; they never remove ones set on the base
        return replace(
            base,
            bold=base.bold or self.bold,
            italic=base.italic or self.italic,
            underline=base.underline or self.underline,
        )

    def copy(self) -> StyleState:
        return StyleState(self.bold, self.italic, self.underline)


@dataclass
class TokenizeResult:
    """Spans of one tokenizer pass plus what it saw along the way.

    ``style`` and ``state`` are the colors and toggles in effect at the end of
    the text; pass them back in to continue tokenizing a following fragment.
    """

    spans: list[Span]
    color_codes: list[tuple[str, str]]
    style: Style
    state: StyleState

    @property
    def last_color(self) -> tuple[str, str] | None:
        """The ``(fg, bg)`` codes of the last COLOR marker, if any."""
        return self.color_codes[-1] if self.color_codes else None


def resolve_color(code: str, palette: Palette) -> Color:
    """Resolve an IRC color code; unknown codes mean the theme background."""
    named = COLOR_TABLE.get(code)
    if named is not None:
        return named
    return palette.bg


def color_selector(code: str) -> int:
    """Row of the color picker that corresponds to a raw color *code*."""
    if not code.isdigit():
        return 0
    return min(int(code), len(COLOR_NAMES) - 1)


def tokenize(
    raw: str,
    base_style: Style,
    palette: Palette,
    *,
    style: Style | None = None,
    state: StyleState | None = None,
) -> TokenizeResult:
    """Split *raw* into styled spans.

    *base_style* is what RESET returns to. *style* and *state* seed the scan
    with a style already in effect (defaults: *base_style* and no toggles).
    """
    current = base_style if style is None else style
    toggles = StyleState() if state is None else state.copy()
    spans: list[Span] = []
    color_codes: list[tuple[str, str]] = []
    text: list[str] = []

    def flush() -> None:
        if text:
            spans.append(Span("".join(text), toggles.apply(current)))
            text.clear()

    i = 0
    while i < len(raw):
        token = consume_markup(raw, i)
        if token is None:
            text.append(raw[i])
            i += 1
            continue

        marker = token.marker
        if marker == BOLD:
            flush()
            toggles.bold = not toggles.bold
        elif marker == ITALIC:
            flush()
            toggles.italic = not toggles.italic
        elif marker == UNDERLINE:
            flush()
            toggles.underline = not toggles.underline
        elif marker == COLOR:
            fg_code = token.fg
            if not fg_code and i + 1 < len(raw):
                fg_code = FALLBACK_FG
            color_codes.append((fg_code, token.bg))
            flush()
            current = replace(
                current,
                fg=resolve_color(fg_code, palette),
                bg=resolve_color(token.bg, palette),
            )
        elif marker == RESET:
            flush()
            toggles = StyleState()
            current = replace(base_style, bg=resolve_color(COLOR_NONE, palette))
        # CTCP is consumed without touching the current run

        i = token.end

    flush()
    return TokenizeResult(spans, color_codes, current, toggles)
