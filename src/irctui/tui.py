"""Component protocols shared by the prompt, chat view and color picker.

Layout, borders and terminal painting live outside this package; a host
application composes these components and paints the lines they render.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "Component",
    "Focusable",
    "is_focusable",
    "CURSOR_MARKER",
]

# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class Component(Protocol):
    """A renderable terminal component.

    ``handle_input`` is optional -- checked at call-sites via ``getattr``.
    """

    def render(self, width: int) -> list[str]:
        """Render the component into a list of terminal lines."""
        ...

    def invalidate(self) -> None:
        """Mark the component as needing a re-render."""
        ...


@runtime_checkable
class Focusable(Protocol):
    """A component that can receive focus."""

    focused: bool


def is_focusable(component: object | None) -> bool:
    """Return ``True`` if *component* implements ``Focusable``."""
    return component is not None and hasattr(component, "focused")


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Zero-width APC sequence marking where the hardware cursor belongs
CURSOR_MARKER = "\x1b_irctui:c\x07"
