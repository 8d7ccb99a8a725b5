"""Tests for frame composition -- regions and content per screen mode."""

from __future__ import annotations

import pytest

from taskview.compose import (
    EXIT_PROMPT,
    HIGHLIGHT_SYMBOL,
    NO_TASK_TEXT,
    TITLE_TEXT,
    list_offset,
    render,
)
from taskview.config import Settings
from taskview.geometry import Rect
from taskview.screen import CurrentScreen
from taskview.selection import TaskList
from taskview.style import Borders
from taskview.widgets import ListView, Paragraph

VIEWPORT = Rect(0, 0, 80, 24)


class _StaleTaskList:
    """A task list whose selection points past the end."""

    items = ("only",)
    selected = 5

    def __len__(self) -> int:
        return 1


# ---------------------------------------------------------------------------
# Base layout
# ---------------------------------------------------------------------------


class TestBaseLayout:
    """Title, task list and footer placements."""

    def test_regions(self) -> None:
        frame = render(VIEWPORT, CurrentScreen.MAIN, TaskList())
        assert frame.area == VIEWPORT
        assert frame.title.area == Rect(0, 0, 80, 3)
        assert frame.task_list.area == Rect(0, 3, 80, 18)
        assert frame.navigation.area == Rect(0, 21, 24, 3)
        assert frame.controls.area == Rect(24, 21, 56, 3)

    def test_title(self) -> None:
        title = render(VIEWPORT, CurrentScreen.MAIN, TaskList()).title.widget
        assert isinstance(title, Paragraph)
        assert title.text == TITLE_TEXT == "Task Manager"
        assert title.alignment == "center"
        assert title.style.bold

    def test_task_list_contents(self) -> None:
        tasks = TaskList(["a", "b", "c"], selected=1)
        view = render(VIEWPORT, CurrentScreen.MAIN, tasks).task_list.widget
        assert isinstance(view, ListView)
        assert view.items == ("a", "b", "c")
        assert view.selected == 1
        assert view.highlight_symbol == HIGHLIGHT_SYMBOL == "* "
        assert view.block is not None
        assert view.block.title == "List"
        assert not view.block.borders & Borders.BOTTOM

    def test_no_selection_marks_nothing(self) -> None:
        view = render(VIEWPORT, CurrentScreen.MAIN, TaskList(["a"])).task_list.widget
        assert isinstance(view, ListView)
        assert view.selected is None

    def test_out_of_range_selection_is_drawn_as_none(self) -> None:
        frame = render(VIEWPORT, CurrentScreen.TASK, _StaleTaskList())  # type: ignore[arg-type]
        assert frame.task_list.widget.selected is None  # type: ignore[union-attr]
        assert frame.overlay is not None
        assert frame.overlay.widget.text == NO_TASK_TEXT  # type: ignore[union-attr]

    @pytest.mark.parametrize("screen", list(CurrentScreen))
    def test_footer_text_follows_screen(self, screen: CurrentScreen) -> None:
        frame = render(VIEWPORT, screen, TaskList())
        assert frame.navigation.widget.text == screen.label  # type: ignore[union-attr]
        assert frame.controls.widget.text == screen.hint  # type: ignore[union-attr]
        assert frame.navigation.widget.style == screen.label_style  # type: ignore[union-attr]

    def test_render_does_not_touch_the_task_list(self) -> None:
        tasks = TaskList(["a", "b"], selected=0)
        render(VIEWPORT, CurrentScreen.TASK, tasks)
        assert tasks.items == ("a", "b")
        assert tasks.selected == 0


# ---------------------------------------------------------------------------
# Scrolling
# ---------------------------------------------------------------------------


class TestListOffset:
    """The selected row is kept inside the visible rows."""

    def test_no_selection(self) -> None:
        assert list_offset(None, 5) == 0

    def test_selection_visible(self) -> None:
        assert list_offset(4, 5) == 0

    def test_selection_below_view(self) -> None:
        assert list_offset(9, 5) == 5

    def test_no_rows(self) -> None:
        assert list_offset(3, 0) == 0

    def test_offset_in_frame(self) -> None:
        # 24 rows leave 18 for the list, 17 inside its top border
        tasks = TaskList([f"task {i}" for i in range(30)], selected=20)
        view = render(VIEWPORT, CurrentScreen.MAIN, tasks).task_list.widget
        assert view.offset == 4  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Overlays
# ---------------------------------------------------------------------------


class TestOverlays:
    """Task-detail and exit-confirmation overlays."""

    @pytest.mark.parametrize("screen", [CurrentScreen.MAIN, CurrentScreen.EDITING])
    def test_no_overlay(self, screen: CurrentScreen) -> None:
        frame = render(VIEWPORT, screen, TaskList(["a"], selected=0))
        assert frame.overlay is None
        assert len(list(frame.elements())) == 4

    def test_task_overlay_without_selection(self) -> None:
        frame = render(VIEWPORT, CurrentScreen.TASK, TaskList(["a", "b"]))
        assert frame.overlay is not None
        assert frame.overlay.area == Rect(32, 10, 16, 5)
        assert frame.overlay.widget.text == "No task Selected"  # type: ignore[union-attr]

    def test_task_overlay_shows_selected_text(self) -> None:
        tasks = TaskList(["first", "  second, exactly  "], selected=1)
        frame = render(VIEWPORT, CurrentScreen.TASK, tasks)
        assert frame.overlay is not None
        assert frame.overlay.widget.text == "  second, exactly  "  # type: ignore[union-attr]
        assert frame.overlay.widget.wrap  # type: ignore[union-attr]

    def test_exit_overlay(self) -> None:
        frame = render(VIEWPORT, CurrentScreen.EXITING, TaskList())
        assert frame.overlay is not None
        assert frame.overlay.area == Rect(16, 9, 48, 6)
        assert frame.overlay.widget.text == EXIT_PROMPT == "Do you want to exit Task Manager?"  # type: ignore[union-attr]

    @pytest.mark.parametrize("screen", [CurrentScreen.TASK, CurrentScreen.EXITING])
    def test_overlay_is_drawn_last_and_clears(self, screen: CurrentScreen) -> None:
        frame = render(VIEWPORT, screen, TaskList())
        elements = list(frame.elements())
        assert elements[-1] is frame.overlay
        assert frame.overlay is not None and frame.overlay.clear

    def test_popup_size_from_settings(self) -> None:
        settings = Settings(task_popup=(100, 100))
        frame = render(VIEWPORT, CurrentScreen.TASK, TaskList(), settings)
        assert frame.overlay is not None
        assert frame.overlay.area == VIEWPORT


# ---------------------------------------------------------------------------
# Degenerate viewports
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("width,height", [(0, 0), (1, 1), (3, 2), (10, 4), (500, 300)])
@pytest.mark.parametrize("screen", list(CurrentScreen))
def test_any_viewport_renders(width: int, height: int, screen: CurrentScreen) -> None:
    viewport = Rect(0, 0, width, height)
    frame = render(viewport, screen, TaskList(["a", "b"], selected=1))
    for placement in frame.elements():
        assert viewport.contains(placement.area)
