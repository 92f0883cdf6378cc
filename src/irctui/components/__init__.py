"""TUI components."""

from irctui.components.chat_view import ChatLine, ChatView
from irctui.components.color_picker import ColorPicker
from irctui.components.prompt_input import PromptInput

__all__ = [
    "ChatLine",
    "ChatView",
    "ColorPicker",
    "PromptInput",
]
