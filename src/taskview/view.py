"""TaskView: draws the task viewer onto a terminal, one frame per call."""

from __future__ import annotations

from taskview.canvas import paint
from taskview.compose import render
from taskview.config import Settings
from taskview.geometry import Rect
from taskview.screen import INITIAL_SCREEN, CurrentScreen
from taskview.selection import TaskList
from taskview.terminal import FramePresenter, Terminal


def frame_lines(
    width: int,
    height: int,
    screen: CurrentScreen,
    tasks: TaskList,
    settings: Settings | None = None,
) -> list[str]:
    """Compose and paint one frame of *width* x *height* cells."""
    if settings is None:
        settings = Settings()
    viewport = Rect(0, 0, max(0, width), max(0, height))
    frame = render(viewport, screen, tasks, settings)
    return paint(frame).to_lines(color=settings.color)


class TaskView:
    """Owns the presenter for a terminal; screen and tasks stay caller-owned.

    Input handling mutates ``screen`` and ``tasks`` between frames and then
    calls :meth:`draw`.
    """

    def __init__(
        self,
        terminal: Terminal,
        tasks: TaskList,
        screen: CurrentScreen = INITIAL_SCREEN,
        settings: Settings | None = None,
    ) -> None:
        self.terminal = terminal
        self.tasks = tasks
        self.screen = screen
        self.settings = settings if settings is not None else Settings()
        self._presenter = FramePresenter(terminal)

    @property
    def full_redraws(self) -> int:
        return self._presenter.full_redraws

    def draw(self) -> list[str]:
        """Draw a frame at the terminal's current size and return its lines."""
        width, height = self.terminal.columns, self.terminal.rows
        lines = frame_lines(width, height, self.screen, self.tasks, self.settings)
        self._presenter.present(lines, (width, height))
        return lines

    def close(self) -> None:
        """Give the terminal back with its cursor visible."""
        self._presenter.stop()

    def __enter__(self) -> TaskView:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
