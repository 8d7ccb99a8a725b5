"""Drawable elements that make up a composed frame.

A ``FrameOutput`` is plain data: every element pairs a ``Rect`` with a
widget description.  Nothing here draws; see :mod:`taskview.canvas`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal, Union

from taskview.geometry import Rect
from taskview.style import PLAIN, BorderSet, Borders, Style

Alignment = Literal["left", "center", "right"]


@dataclass(frozen=True)
class Block:
    """Border, optional title and base style drawn behind a widget."""

    borders: Borders = Borders.ALL
    border_set: BorderSet = PLAIN
    title: str | None = None
    style: Style = field(default_factory=Style)

    def inner(self, area: Rect) -> Rect:
        """Return the part of *area* left for content inside the borders."""
        x, y = area.x, area.y
        width, height = area.width, area.height
        if self.borders & Borders.LEFT:
            x = min(x + 1, area.right)
            width = max(0, width - 1)
        if self.borders & Borders.TOP or self.title:
            y = min(y + 1, area.bottom)
            height = max(0, height - 1)
        if self.borders & Borders.RIGHT:
            width = max(0, width - 1)
        if self.borders & Borders.BOTTOM:
            height = max(0, height - 1)
        return Rect(x, y, width, height)


@dataclass(frozen=True)
class Paragraph:
    """A block of text with one style, optionally word-wrapped."""

    text: str
    style: Style = field(default_factory=Style)
    block: Block | None = None
    alignment: Alignment = "left"
    wrap: bool = False


@dataclass(frozen=True)
class ListView:
    """Rows of text with an optional highlighted row.

    ``offset`` is the index of the first visible row.
    """

    items: tuple[str, ...]
    selected: int | None = None
    offset: int = 0
    style: Style = field(default_factory=Style)
    highlight_style: Style = field(default_factory=Style)
    highlight_symbol: str = ""
    block: Block | None = None


Widget = Union[Paragraph, ListView]


@dataclass(frozen=True)
class Placement:
    """A widget assigned to a region.

    ``clear`` blanks the region before drawing so nothing underneath shows
    through.
    """

    area: Rect
    widget: Widget
    clear: bool = False


@dataclass(frozen=True)
class FrameOutput:
    """Everything drawn for one frame, by role."""

    area: Rect
    title: Placement
    task_list: Placement
    navigation: Placement
    controls: Placement
    overlay: Placement | None = None

    def elements(self) -> Iterator[Placement]:
        """Yield placements in draw order; the overlay comes last."""
        yield self.title
        yield self.task_list
        yield self.navigation
        yield self.controls
        if self.overlay is not None:
            yield self.overlay
