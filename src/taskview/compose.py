"""Frame composition: viewport + screen mode + task list -> FrameOutput.

:func:`render` partitions the viewport with :func:`~taskview.geometry.main_layout`,
fills the title, task list and footer regions, and adds the task-detail or
exit-confirmation overlay when the screen mode calls for one.  It has no
side effects and never raises for a valid viewport and task list.
"""

from __future__ import annotations

import logging

from taskview.config import Settings
from taskview.geometry import (
    FOOTER_HEIGHT,
    TITLE_HEIGHT,
    Rect,
    centered_rect,
    footer_layout,
    main_layout,
)
from taskview.screen import CurrentScreen
from taskview.selection import TaskList
from taskview.style import DOUBLE, ROUNDED, Borders, Color, Style
from taskview.widgets import Block, FrameOutput, ListView, Paragraph, Placement

logger = logging.getLogger(__name__)

__all__ = [
    "TITLE_TEXT",
    "LIST_TITLE",
    "HIGHLIGHT_SYMBOL",
    "NO_TASK_TEXT",
    "EXIT_PROMPT",
    "render",
    "list_offset",
]

TITLE_TEXT = "Task Manager"
LIST_TITLE = "List"
HIGHLIGHT_SYMBOL = "* "
NO_TASK_TEXT = "No task Selected"
EXIT_PROMPT = "Do you want to exit Task Manager?"

_TITLE_STYLE = Style(fg=Color.GREEN, bold=True)
_LIST_BLOCK_STYLE = Style(fg=Color.WHITE)
_LIST_STYLE = Style(fg=Color.CYAN)
_HIGHLIGHT_STYLE = Style(fg=Color.WHITE, bold=True)
_HINT_STYLE = Style(fg=Color.GREEN)
_POPUP_BLOCK_STYLE = Style(fg=Color.DARK_GRAY)
_TASK_TEXT_STYLE = Style(fg=Color.GREEN, bold=True)
_EXIT_TEXT_STYLE = Style(fg=Color.RED)

_LIST_BLOCK = Block(
    borders=Borders.TOP | Borders.LEFT | Borders.RIGHT,
    title=LIST_TITLE,
    style=_LIST_BLOCK_STYLE,
)
_POPUP_BLOCK = Block(border_set=DOUBLE, style=_POPUP_BLOCK_STYLE)


def render(
    viewport: Rect,
    screen: CurrentScreen,
    tasks: TaskList,
    settings: Settings | None = None,
) -> FrameOutput:
    """Compose one frame for *viewport*."""
    if settings is None:
        settings = Settings()
    if viewport.height < TITLE_HEIGHT + FOOTER_HEIGHT:
        logger.debug(
            "Viewport %dx%d is too short for the full layout",
            viewport.width,
            viewport.height,
        )

    title_area, list_area, footer_area = main_layout(viewport)
    nav_area, hints_area = footer_layout(footer_area)
    selected = _checked_selection(tasks)

    return FrameOutput(
        area=viewport,
        title=Placement(title_area, _title()),
        task_list=Placement(list_area, _task_list(tasks, selected, list_area)),
        navigation=Placement(nav_area, _navigation(screen)),
        controls=Placement(hints_area, _controls(screen)),
        overlay=_overlay(viewport, screen, tasks, selected, settings),
    )


def _checked_selection(tasks: TaskList) -> int | None:
    """Return the selected index, treating an out-of-range one as unset."""
    selected = tasks.selected
    if selected is not None and not 0 <= selected < len(tasks):
        logger.debug("Selected index %d is out of range, drawing none", selected)
        return None
    return selected


# ---------------------------------------------------------------------------
# Base layout
# ---------------------------------------------------------------------------


def _title() -> Paragraph:
    return Paragraph(
        TITLE_TEXT,
        style=_TITLE_STYLE,
        block=Block(border_set=ROUNDED),
        alignment="center",
    )


def list_offset(selected: int | None, visible_rows: int) -> int:
    """First row to draw so that *selected* is within *visible_rows*.

    Derived from the selection alone on every frame, so moving up from the
    bottom scrolls the list rather than keeping the previous offset.
    """
    if selected is None or visible_rows <= 0:
        return 0
    return max(0, selected - visible_rows + 1)


def _task_list(tasks: TaskList, selected: int | None, area: Rect) -> ListView:
    visible_rows = _LIST_BLOCK.inner(area).height
    return ListView(
        items=tasks.items,
        selected=selected,
        offset=list_offset(selected, visible_rows),
        style=_LIST_STYLE,
        highlight_style=_HIGHLIGHT_STYLE,
        highlight_symbol=HIGHLIGHT_SYMBOL,
        block=_LIST_BLOCK,
    )


def _navigation(screen: CurrentScreen) -> Paragraph:
    return Paragraph(screen.label, style=screen.label_style, block=Block())


def _controls(screen: CurrentScreen) -> Paragraph:
    return Paragraph(screen.hint, style=_HINT_STYLE, block=Block())


# ---------------------------------------------------------------------------
# Overlays
# ---------------------------------------------------------------------------


def _overlay(
    viewport: Rect,
    screen: CurrentScreen,
    tasks: TaskList,
    selected: int | None,
    settings: Settings,
) -> Placement | None:
    if screen is CurrentScreen.TASK:
        text = tasks.items[selected] if selected is not None else NO_TASK_TEXT
        percent_x, percent_y = settings.task_popup
        return Placement(
            centered_rect(percent_x, percent_y, viewport),
            Paragraph(text, style=_TASK_TEXT_STYLE, block=_POPUP_BLOCK, wrap=True),
            clear=True,
        )
    if screen is CurrentScreen.EXITING:
        percent_x, percent_y = settings.exit_popup
        return Placement(
            centered_rect(percent_x, percent_y, viewport),
            Paragraph(EXIT_PROMPT, style=_EXIT_TEXT_STYLE, block=_POPUP_BLOCK, wrap=True),
            clear=True,
        )
    return None
