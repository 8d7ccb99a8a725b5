"""TaskList: an ordered list of task strings with an optional selection."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

# Returned by TaskList.current() when nothing is selected
NO_SELECTION = None


class TaskList:
    """Task texts in insertion order plus at most one selected index.

    ``selected`` is either ``None`` or a valid index into ``items``.  Every
    method keeps that true; requests that would break it are ignored.
    """

    def __init__(
        self,
        items: Iterable[str] | None = None,
        selected: int | None = None,
    ) -> None:
        self._items: list[str] = list(items) if items is not None else []
        self._selected: int | None = None
        if selected is not None:
            self.select_index(selected)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    @property
    def selected(self) -> int | None:
        return self._selected

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"TaskList(items={self._items!r}, selected={self._selected!r})"

    def current(self) -> str | None:
        """Return the selected task's text, or ``NO_SELECTION``."""
        if self._selected is None:
            return NO_SELECTION
        return self._items[self._selected]

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def move_next(self) -> None:
        """Select the following task, stopping at the last one."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = min(self._selected + 1, len(self._items) - 1)

    def move_previous(self) -> None:
        """Select the preceding task, stopping at the first one."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = max(self._selected - 1, 0)

    def select_index(self, index: int) -> None:
        """Select *index*; out-of-range indices leave the selection alone."""
        if 0 <= index < len(self._items):
            self._selected = index
        else:
            logger.debug(
                "Ignoring selection of index %d (%d tasks)", index, len(self._items)
            )

    def clear_selection(self) -> None:
        self._selected = None

    # ------------------------------------------------------------------
    # Mutation (used by task storage)
    # ------------------------------------------------------------------

    def append(self, text: str) -> None:
        self._items.append(text)

    def insert(self, index: int, text: str) -> None:
        """Insert *text* before *index* (clamped to the list bounds).

        The selected task stays selected: its index shifts when the new task
        lands at or before it.
        """
        index = max(0, min(index, len(self._items)))
        self._items.insert(index, text)
        if self._selected is not None and index <= self._selected:
            self._selected += 1

    def remove(self, index: int) -> str | None:
        """Remove and return the task at *index* (``None`` if out of range).

        Removing the selected task moves the selection onto whichever task
        now occupies that position, or the new last task; an emptied list
        has no selection.
        """
        if not 0 <= index < len(self._items):
            return None
        text = self._items.pop(index)
        if self._selected is not None:
            if not self._items:
                self._selected = None
            elif index < self._selected:
                self._selected -= 1
            elif self._selected >= len(self._items):
                self._selected = len(self._items) - 1
        return text
