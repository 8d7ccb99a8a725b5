"""Cell buffer: paints a ``FrameOutput`` into styled terminal lines.

The buffer is a grid of cells, each holding one grapheme and a ``Style``.
A wide grapheme sits in its first cell and leaves an empty continuation
cell after it.  All drawing is clipped to the target region and to the
buffer.
"""

from __future__ import annotations

from dataclasses import dataclass

from taskview.geometry import Rect
from taskview.style import RESET, Borders, Style
from taskview.utils import grapheme_width, graphemes, truncate_to_width, visible_width, wrap_text
from taskview.widgets import Block, FrameOutput, ListView, Paragraph, Placement

__all__ = ["Cell", "Buffer", "paint", "render_placement"]


@dataclass
class Cell:
    symbol: str = " "
    style: Style = Style()

    def reset(self) -> None:
        self.symbol = " "
        self.style = Style()


class Buffer:
    """A rectangular grid of cells covering *area*."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._cells: list[Cell] = [Cell() for _ in range(area.area)]

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _index(self, x: int, y: int) -> int | None:
        if not (self.area.left <= x < self.area.right):
            return None
        if not (self.area.top <= y < self.area.bottom):
            return None
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def cell(self, x: int, y: int) -> Cell | None:
        index = self._index(x, y)
        return self._cells[index] if index is not None else None

    def set_style(self, area: Rect, style: Style) -> None:
        """Patch *style* onto every cell of *area*."""
        area = area.intersection(self.area)
        for y in range(area.top, area.bottom):
            for x in range(area.left, area.right):
                cell = self.cell(x, y)
                if cell is not None:
                    cell.style = cell.style.patch(style)

    def clear(self, area: Rect) -> None:
        area = area.intersection(self.area)
        for y in range(area.top, area.bottom):
            for x in range(area.left, area.right):
                cell = self.cell(x, y)
                if cell is not None:
                    cell.reset()

    def set_string(
        self,
        x: int,
        y: int,
        text: str,
        style: Style,
        max_width: int | None = None,
    ) -> int:
        """Write *text* starting at (*x*, *y*); return the columns used.

        Stops at *max_width* columns or the buffer edge, whichever comes
        first.  A wide grapheme that would straddle the limit is dropped.
        """
        limit = self.area.right - x
        if max_width is not None:
            limit = min(limit, max_width)
        if limit <= 0 or self.cell(x, y) is None:
            return 0

        used = 0
        for g in graphemes(text):
            w = grapheme_width(g)
            if w == 0:
                continue
            if used + w > limit:
                break
            cell = self.cell(x + used, y)
            if cell is not None:
                cell.symbol = g
                cell.style = cell.style.patch(style)
            for extra in range(1, w):
                cont = self.cell(x + used + extra, y)
                if cont is not None:
                    cont.symbol = ""
                    cont.style = cell.style if cell is not None else style
            used += w
        return used

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_lines(self, color: bool = True) -> list[str]:
        """Return one string per row, with SGR sequences when *color* is set."""
        lines: list[str] = []
        width = self.area.width
        for row in range(self.area.height):
            cells = self._cells[row * width : (row + 1) * width]
            if not color:
                lines.append("".join(c.symbol for c in cells))
                continue
            parts: list[str] = []
            current: Style | None = None
            for c in cells:
                if c.style != current:
                    if current is not None and current.sgr():
                        parts.append(RESET)
                    parts.append(c.style.sgr())
                    current = c.style
                parts.append(c.symbol)
            if current is not None and current.sgr():
                parts.append(RESET)
            lines.append("".join(parts))
        return lines


# ---------------------------------------------------------------------------
# Widget painting
# ---------------------------------------------------------------------------


def _render_block(block: Block, area: Rect, buf: Buffer) -> Rect:
    """Draw *block* into *area* and return the inner content area."""
    if area.is_empty():
        return area

    buf.set_style(area, block.style)
    glyphs = block.border_set
    borders = block.borders
    left, top = area.left, area.top
    right, bottom = area.right - 1, area.bottom - 1

    if borders & Borders.TOP:
        for x in range(left, right + 1):
            buf.set_string(x, top, glyphs.horizontal, block.style, 1)
    if borders & Borders.BOTTOM:
        for x in range(left, right + 1):
            buf.set_string(x, bottom, glyphs.horizontal, block.style, 1)
    if borders & Borders.LEFT:
        for y in range(top, bottom + 1):
            buf.set_string(left, y, glyphs.vertical, block.style, 1)
    if borders & Borders.RIGHT:
        for y in range(top, bottom + 1):
            buf.set_string(right, y, glyphs.vertical, block.style, 1)

    corners = (
        (Borders.TOP | Borders.LEFT, left, top, glyphs.top_left),
        (Borders.TOP | Borders.RIGHT, right, top, glyphs.top_right),
        (Borders.BOTTOM | Borders.LEFT, left, bottom, glyphs.bottom_left),
        (Borders.BOTTOM | Borders.RIGHT, right, bottom, glyphs.bottom_right),
    )
    for flags, x, y, glyph in corners:
        if borders & flags == flags:
            buf.set_string(x, y, glyph, block.style, 1)

    if block.title:
        title_x = left + 1 if borders & Borders.LEFT else left
        title_end = right if borders & Borders.RIGHT else right + 1
        buf.set_string(title_x, top, block.title, block.style, title_end - title_x)

    return block.inner(area)


def _aligned_x(area: Rect, line_width: int, alignment: str) -> int:
    if alignment == "center":
        return area.x + max(0, (area.width - line_width) // 2)
    if alignment == "right":
        return area.x + max(0, area.width - line_width)
    return area.x


def _render_paragraph(paragraph: Paragraph, area: Rect, buf: Buffer) -> None:
    if paragraph.block is not None:
        area = _render_block(paragraph.block, area, buf)
    if area.is_empty():
        return

    buf.set_style(area, paragraph.style)
    if paragraph.wrap:
        lines = wrap_text(paragraph.text, area.width)
    else:
        lines = [truncate_to_width(line, area.width) for line in paragraph.text.split("\n")]

    for row, line in enumerate(lines[: area.height]):
        x = _aligned_x(area, visible_width(line), paragraph.alignment)
        buf.set_string(x, area.y + row, line, paragraph.style, area.right - x)


def _render_list(view: ListView, area: Rect, buf: Buffer) -> None:
    if view.block is not None:
        area = _render_block(view.block, area, buf)
    if area.is_empty():
        return

    buf.set_style(area, view.style)
    # Rows are only indented for the marker while something is selected
    marker_width = visible_width(view.highlight_symbol) if view.selected is not None else 0
    blank_marker = " " * marker_width

    visible = view.items[view.offset : view.offset + area.height]
    for row, item in enumerate(visible):
        y = area.y + row
        is_selected = view.offset + row == view.selected
        style = view.style.patch(view.highlight_style) if is_selected else view.style
        if is_selected:
            buf.set_style(Rect(area.x, y, area.width, 1), view.highlight_style)
        marker = view.highlight_symbol if is_selected else blank_marker
        used = buf.set_string(area.x, y, marker, style, area.width)
        buf.set_string(area.x + used, y, item, style, area.width - used)


def render_placement(placement: Placement, buf: Buffer) -> None:
    """Draw a single placement into *buf*."""
    area = placement.area.intersection(buf.area)
    if placement.clear:
        buf.clear(area)
    widget = placement.widget
    if isinstance(widget, ListView):
        _render_list(widget, area, buf)
    else:
        _render_paragraph(widget, area, buf)


def paint(frame: FrameOutput) -> Buffer:
    """Paint every element of *frame*, overlay last, into a fresh buffer."""
    buf = Buffer(frame.area)
    for placement in frame.elements():
        render_placement(placement, buf)
    return buf
