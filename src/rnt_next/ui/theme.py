"""Terminal theme for rnt-next.

Next.js-flavoured palette: black and white with a blue accent.
"""

from dataclasses import dataclass

from rich.style import Style
from rich.theme import Theme


@dataclass
class Palette:
    """rnt-next color palette."""

    # Primary colors
    PRIMARY = "#0070F3"      # Vercel blue
    SECONDARY = "#FFFFFF"
    ACCENT = "#7928CA"       # Violet

    # Status colors
    SUCCESS = "#50E3C2"
    WARNING = "#F5A623"
    ERROR = "#EE0000"

    # UI colors
    BORDER = "#0070F3"
    TEXT_DIM = "#888888"


# Rich theme for console styling
THEME = Theme({
    "title": Style(color=Palette.PRIMARY, bold=True),
    "border": Style(color=Palette.BORDER),
    "accent": Style(color=Palette.ACCENT),
    "text.dim": Style(color=Palette.TEXT_DIM),

    # Status styles
    "success": Style(color=Palette.SUCCESS, bold=True),
    "warning": Style(color=Palette.WARNING),
    "error": Style(color=Palette.ERROR, bold=True),

    # Plan listing
    "path": Style(color=Palette.SECONDARY),
    "package": Style(color=Palette.ACCENT),
})


class Symbols:
    """Terminal symbols for status display."""

    COMPLETE = "✓"
    FAILED = "✗"
    ARROW_RIGHT = "▸"
    DOT = "●"
