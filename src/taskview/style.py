"""Colours, text styles and border glyph sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------

_RESET = "\x1b[0m"
_BOLD = "1"


class Color(Enum):
    """Foreground colours, valued by their SGR parameter."""

    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    GRAY = "37"
    DARK_GRAY = "90"
    WHITE = "97"


@dataclass(frozen=True)
class Style:
    """Foreground colour plus the bold modifier.

    ``fg=None`` means "inherit whatever is underneath" when patched onto
    another style.
    """

    fg: Color | None = None
    bold: bool = False

    def patch(self, other: Style) -> Style:
        """Layer *other* on top of this style."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bold=self.bold or other.bold,
        )

    def sgr(self) -> str:
        """Return the escape sequence that switches to this style."""
        params: list[str] = []
        if self.bold:
            params.append(_BOLD)
        if self.fg is not None:
            params.append(self.fg.value)
        if not params:
            return ""
        return f"\x1b[{';'.join(params)}m"

    def apply(self, text: str) -> str:
        """Wrap *text* in this style's escape sequence and a reset."""
        code = self.sgr()
        if not code or not text:
            return text
        return f"{code}{text}{_RESET}"


RESET = _RESET


# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------


class Borders(IntFlag):
    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8
    ALL = TOP | RIGHT | BOTTOM | LEFT


@dataclass(frozen=True)
class BorderSet:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


PLAIN = BorderSet("┌", "┐", "└", "┘", "─", "│")
ROUNDED = BorderSet("╭", "╮", "╰", "╯", "─", "│")
DOUBLE = BorderSet("╔", "╗", "╚", "╝", "═", "║")
