"""rnt-next UI components."""

from rnt_next.ui.theme import Palette, Symbols, THEME

__all__ = [
    "Palette",
    "Symbols",
    "THEME",
]
