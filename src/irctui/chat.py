"""Chat history formatting: sender labels and markup-aware word wrapping."""

from __future__ import annotations

from irctui.markup import iter_markup
from irctui.textstyle import Span, Style, StyleState, tokenize
from irctui.theme import Palette
from irctui.utils import char_width, visible_width

NICK_WIDTH = 10
ELLIPSIS = "…"


def format_sender_label(sender: str, width: int = NICK_WIDTH) -> str:
    """Fixed-width ``"name: "`` label; long names are cut with an ellipsis."""
    if len(sender) > width:
        name = sender[: width - 1] + ELLIPSIS
    else:
        name = sender.ljust(width)
    return f"{name}: "


def _markup_only(text: str) -> str:
    return "".join(
        text[token.start : token.end] for _i, token in iter_markup(text) if token is not None
    )


def _segments(line: str) -> list[list]:
    """Split *line* into ``[kind, text, width]`` runs of words and spaces.

    Markup carries no width and is glued to the visible char that follows it
    (or to the last run when nothing follows).
    """
    segments: list[list] = []
    pending = ""
    for i, token in iter_markup(line):
        if token is not None:
            pending += line[token.start : token.end]
            continue
        ch = line[i]
        kind = "space" if ch == " " else "word"
        text = pending + ch
        pending = ""
        if segments and segments[-1][0] == kind:
            segments[-1][1] += text
            segments[-1][2] += char_width(ch)
        else:
            segments.append([kind, text, char_width(ch)])
    if pending:
        if segments:
            segments[-1][1] += pending
        else:
            segments.append(["word", pending, 0])
    return segments


def _wrap_single_line(line: str, width: int) -> list[str]:
    result: list[str] = []
    current: list[str] = []
    current_width = 0
    has_word = False
    spaces: list[list] = []

    for kind, text, w in _segments(line):
        if kind == "space":
            spaces.append([text, w])
            continue

        space_width = sum(sw for _t, sw in spaces)
        if has_word and current_width + space_width + w > width:
            result.append("".join(current))
            # Spaces at the break are dropped but their markup must survive
            current = [_markup_only(t) for t, _sw in spaces]
            current_width = 0
        else:
            current.extend(t for t, _sw in spaces)
            current_width += space_width
        spaces = []

        current.append(text)
        current_width += w
        has_word = True

    if not has_word:
        current.extend(t for t, _sw in spaces)
    else:
        current.extend(_markup_only(t) for t, _sw in spaces)
    result.append("".join(current))
    return result


def wrap_markup(body: str, width: int) -> list[str]:
    """Word-wrap *body* to *width* visible columns without breaking words.

    Markup is kept in the returned fragments but takes no columns. A word wider
    than *width* gets a line of its own.
    """
    if width <= 0:
        return [body]

    result: list[str] = []
    for physical_line in body.split("\n"):
        result.extend(_wrap_single_line(physical_line, width))
    return result


def wrap_message(
    sender: str,
    body: str,
    width_budget: int,
    palette: Palette,
) -> list[list[Span]]:
    """Render one chat message as wrapped, styled display lines.

    The first line starts with the sender label in the highlight color; later
    lines start with blank padding of the same width so the text stays aligned.
    Modifiers and colors carry over from one wrapped line to the next.
    """
    label = format_sender_label(sender)
    label_width = visible_width(label)
    wrap_width = max(width_budget - label_width, 1)

    base_style = Style(fg=palette.text)
    label_style = Style(fg=palette.highlight, bold=True)

    lines: list[list[Span]] = []
    style: Style | None = None
    state: StyleState | None = None
    for i, fragment in enumerate(wrap_markup(body, wrap_width)):
        if i == 0:
            spans = [Span(label, label_style)]
        else:
            spans = [Span(" " * label_width)]
        result = tokenize(fragment, base_style, palette, style=style, state=state)
        style, state = result.style, result.state
        spans.extend(result.spans)
        lines.append(spans)
    return lines
