"""Prompt keybindings manager."""

from __future__ import annotations

from typing import Literal

from irctui.markup import BOLD, COLOR, ITALIC, RESET, UNDERLINE

PromptAction = Literal[
    # Cursor movement
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    # Deletion
    "deleteCharBackward",
    # Submission and history
    "submit",
    "historyUp",
    "historyDown",
    # Markup insertion
    "insertBold",
    "insertItalic",
    "insertUnderline",
    "insertReset",
    "insertColor",
]

# Raw terminal input sequence, e.g. "\x1b[D" for the left arrow
KeySequence = str

PromptKeybindingsConfig = dict[PromptAction, KeySequence | list[KeySequence]]

DEFAULT_PROMPT_KEYBINDINGS: dict[PromptAction, KeySequence | list[KeySequence]] = {
    # Cursor movement
    "cursorLeft": ["\x1b[D", "\x1bOD"],
    "cursorRight": ["\x1b[C", "\x1bOC"],
    "cursorLineStart": ["\x1b[H", "\x1bOH", "\x1b[1~", "\x01"],
    "cursorLineEnd": ["\x1b[F", "\x1bOF", "\x1b[4~", "\x05"],
    # Deletion
    "deleteCharBackward": ["\x7f", "\x08"],
    # Submission and history
    "submit": ["\r", "\n"],
    "historyUp": ["\x1b[A", "\x1bOA"],
    "historyDown": ["\x1b[B", "\x1bOB"],
    # Markup insertion: ctrl+b, ctrl+s, ctrl+u, ctrl+n, ctrl+k
    "insertBold": "\x02",
    "insertItalic": "\x13",
    "insertUnderline": "\x15",
    "insertReset": "\x0e",
    "insertColor": "\x0b",
}

# Marker inserted into the prompt by each markup action
MARKUP_ACTIONS: dict[PromptAction, str] = {
    "insertBold": BOLD,
    "insertItalic": ITALIC,
    "insertUnderline": UNDERLINE,
    "insertReset": RESET,
    "insertColor": COLOR,
}


class PromptKeybindingsManager:
    """Manages keybindings for the prompt."""

    def __init__(self, config: PromptKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[PromptAction, list[KeySequence]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: PromptKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_PROMPT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: PromptAction) -> bool:
        """Check if input matches a specific action."""
        return data in self._action_to_keys.get(action, [])

    def get_keys(self, action: PromptAction) -> list[KeySequence]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: PromptKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_prompt_keybindings: PromptKeybindingsManager | None = None


def get_prompt_keybindings() -> PromptKeybindingsManager:
    global _global_prompt_keybindings
    if _global_prompt_keybindings is None:
        _global_prompt_keybindings = PromptKeybindingsManager()
    return _global_prompt_keybindings


def set_prompt_keybindings(manager: PromptKeybindingsManager) -> None:
    global _global_prompt_keybindings
    _global_prompt_keybindings = manager
