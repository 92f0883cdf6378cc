"""irctui: IRC markup editing and rendering for character-grid terminals."""

# Components (re-exported from components package)
from irctui.components import ChatLine, ChatView, ColorPicker, PromptInput

# Chat history formatting
from irctui.chat import format_sender_label, wrap_markup, wrap_message

# Raw/visible index map
from irctui.cursor import IndexMap, build_map, clamp

# Keybindings
from irctui.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)

# Markup alphabet
from irctui.markup import (
    BOLD,
    COLOR,
    COLOR_NAMES,
    COLOR_TABLE,
    CTCP,
    ITALIC,
    MARKERS,
    RESET,
    UNDERLINE,
    MarkupToken,
    NamedColor,
    consume_markup,
    strip_markup,
)

# Prompt editing
from irctui.prompt import PromptBuffer

# Style tokenizer
from irctui.textstyle import (
    Span,
    Style,
    StyleState,
    TokenizeResult,
    color_selector,
    resolve_color,
    tokenize,
)

# Theme
from irctui.theme import DEFAULT_PALETTE, ConfigError, Palette, load_palette

# Component protocols
from irctui.tui import CURSOR_MARKER, Component, Focusable, is_focusable

# Utilities
from irctui.utils import char_width, render_spans, style_to_sgr, visible_width

# Viewport
from irctui.viewport import PromptWindow, window

__all__ = [
    # Components
    "ChatLine",
    "ChatView",
    "ColorPicker",
    "PromptInput",
    # Chat
    "format_sender_label",
    "wrap_markup",
    "wrap_message",
    # Index map
    "IndexMap",
    "build_map",
    "clamp",
    # Keybindings
    "DEFAULT_PROMPT_KEYBINDINGS",
    "PromptAction",
    "PromptKeybindingsManager",
    "get_prompt_keybindings",
    "set_prompt_keybindings",
    # Markup
    "BOLD",
    "COLOR",
    "COLOR_NAMES",
    "COLOR_TABLE",
    "CTCP",
    "ITALIC",
    "MARKERS",
    "RESET",
    "UNDERLINE",
    "MarkupToken",
    "NamedColor",
    "consume_markup",
    "strip_markup",
    # Prompt
    "PromptBuffer",
    # Tokenizer
    "Span",
    "Style",
    "StyleState",
    "TokenizeResult",
    "color_selector",
    "resolve_color",
    "tokenize",
    # Theme
    "DEFAULT_PALETTE",
    "ConfigError",
    "Palette",
    "load_palette",
    # Protocols
    "CURSOR_MARKER",
    "Component",
    "Focusable",
    "is_focusable",
    # Utilities
    "char_width",
    "render_spans",
    "style_to_sgr",
    "visible_width",
    # Viewport
    "PromptWindow",
    "window",
]
