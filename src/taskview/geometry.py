"""Rectangle geometry and constraint-based layout.

Provides the ``Rect`` value type, the ``Length`` / ``Min`` / ``Percentage``
constraints, a small one-axis constraint solver (:func:`split`) and the
layouts used by the task viewer: the three-band main layout, the 30/70
footer split and the two-pass centred overlay rectangle.

Every function here is pure.  Regions are recomputed for each frame and are
never cached, so a resize between frames cannot leave stale geometry behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

__all__ = [
    "Rect",
    "Direction",
    "Length",
    "Min",
    "Percentage",
    "Constraint",
    "split",
    "main_layout",
    "footer_layout",
    "centered_rect",
    "TITLE_HEIGHT",
    "LIST_MIN_HEIGHT",
    "FOOTER_HEIGHT",
]

TITLE_HEIGHT = 3
LIST_MIN_HEIGHT = 2
FOOTER_HEIGHT = 3

# Footer split: navigation indicator / control hints
_FOOTER_SPLIT = (30, 70)


# ---------------------------------------------------------------------------
# Rect
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect dimensions must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        """One past the last column."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """One past the last row."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def inner(self, horizontal: int = 1, vertical: int = 1) -> Rect:
        """Shrink by *horizontal* columns and *vertical* rows on each side.

        Collapses to an empty rect at the centre rather than going negative.
        """
        width = max(0, self.width - 2 * horizontal)
        height = max(0, self.height - 2 * vertical)
        x = self.x + min(horizontal, self.width // 2)
        y = self.y + min(vertical, self.height // 2)
        return Rect(x, y, width, height)

    def contains(self, other: Rect) -> bool:
        """Return ``True`` if *other* lies entirely within this rect."""
        return (
            other.left >= self.left
            and other.top >= self.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersection(self, other: Rect) -> Rect:
        """Return the overlap of two rects (empty when they do not meet)."""
        x1 = max(self.left, other.left)
        y1 = max(self.top, other.top)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        if x2 <= x1 or y2 <= y1:
            return Rect(x1, y1, 0, 0)
        return Rect(x1, y1, x2 - x1, y2 - y1)


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


class Direction(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Length:
    """Exactly *value* cells."""

    value: int


@dataclass(frozen=True)
class Min:
    """At least *value* cells; absorbs any space left over."""

    value: int


@dataclass(frozen=True)
class Percentage:
    """*value* percent of the space being split."""

    value: int


Constraint = Union[Length, Min, Percentage]


def _percent_of(total: int, percent: int) -> int:
    """``round(total * percent / 100)`` with halves rounded up, in integers."""
    return (total * percent * 2 + 100) // 200


def _resolve_sizes(total: int, constraints: Sequence[Constraint]) -> list[int]:
    sizes: list[int] = []
    flexible: list[int] = []
    for i, constraint in enumerate(constraints):
        if isinstance(constraint, Length):
            sizes.append(max(0, constraint.value))
        elif isinstance(constraint, Percentage):
            sizes.append(_percent_of(total, max(0, constraint.value)))
        else:
            sizes.append(0)
            flexible.append(i)

    if flexible:
        # Fixed constraints first; Min constraints share only what remains,
        # even when that is less than their stated minimum.
        remaining = max(0, total - sum(sizes))
        share, extra = divmod(remaining, len(flexible))
        for n, i in enumerate(flexible):
            minimum = max(0, constraints[i].value)
            wanted = share + (1 if n < extra else 0)
            sizes[i] = min(remaining, max(wanted, minimum))
            remaining -= sizes[i]
    return sizes


def split(
    area: Rect,
    direction: Direction,
    constraints: Sequence[Constraint],
) -> list[Rect]:
    """Split *area* along one axis according to *constraints*.

    Segments are laid out in order and clipped to *area*, so an undersized
    area starves the trailing segments rather than producing negative sizes.
    When no constraint is flexible the final segment is stretched to the far
    edge of *area*, which keeps the total extent conserved after rounding.
    """
    if not constraints:
        return []

    vertical = direction is Direction.VERTICAL
    total = area.height if vertical else area.width
    sizes = _resolve_sizes(total, constraints)

    if not any(isinstance(c, Min) for c in constraints):
        placed = sum(sizes[:-1])
        sizes[-1] = max(0, total - placed)

    rects: list[Rect] = []
    offset = 0
    for size in sizes:
        start = min(offset, total)
        size = max(0, min(size, total - start))
        if vertical:
            rects.append(Rect(area.x, area.y + start, area.width, size))
        else:
            rects.append(Rect(area.x + start, area.y, size, area.height))
        offset = start + size
    return rects


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------


def main_layout(area: Rect) -> tuple[Rect, Rect, Rect]:
    """Partition *area* into title, task list and footer bands."""
    title, body, footer = split(
        area,
        Direction.VERTICAL,
        [Length(TITLE_HEIGHT), Min(LIST_MIN_HEIGHT), Length(FOOTER_HEIGHT)],
    )
    return title, body, footer


def footer_layout(area: Rect) -> tuple[Rect, Rect]:
    """Split the footer into the navigation label and the control hints."""
    nav, hints = split(
        area,
        Direction.HORIZONTAL,
        [Percentage(_FOOTER_SPLIT[0]), Percentage(_FOOTER_SPLIT[1])],
    )
    return nav, hints


def _clamp_percent(value: int) -> int:
    return max(0, min(100, value))


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rect covering *percent_x* by *percent_y* of *area*, centred.

    *area* is cut into three horizontal bands and the middle one is then cut
    into three columns; the middle column is the result.
    """
    percent_x = _clamp_percent(percent_x)
    percent_y = _clamp_percent(percent_y)

    margin_y = (100 - percent_y) // 2
    _, band, _ = split(
        area,
        Direction.VERTICAL,
        [Percentage(margin_y), Percentage(percent_y), Percentage(margin_y)],
    )

    margin_x = (100 - percent_x) // 2
    _, popup, _ = split(
        band,
        Direction.HORIZONTAL,
        [Percentage(margin_x), Percentage(percent_x), Percentage(margin_x)],
    )
    return popup
