"""CurrentScreen: which mode the viewer is in, and what each mode shows."""

from __future__ import annotations

from enum import Enum

from taskview.style import Color, Style

_MOVE_HINT = " [⬆] / [⬇] to move, [➡] to select [⬅] to unselect"


class CurrentScreen(Enum):
    """The active interaction mode.

    Transitions are driven by input handling elsewhere; this type only
    carries the per-mode footer text and overlay presence.
    """

    MAIN = "main"
    EDITING = "editing"
    TASK = "task"
    EXITING = "exiting"

    @property
    def label(self) -> str:
        """Navigation label shown in the left footer cell."""
        return _LABELS[self]

    @property
    def hint(self) -> str:
        """Control legend shown in the right footer cell."""
        return _HINTS[self]

    @property
    def label_style(self) -> Style:
        return _LABEL_STYLES[self]

    @property
    def has_overlay(self) -> bool:
        return self in (CurrentScreen.TASK, CurrentScreen.EXITING)


INITIAL_SCREEN = CurrentScreen.MAIN

_LABELS: dict[CurrentScreen, str] = {
    CurrentScreen.MAIN: " Main Menu",
    CurrentScreen.EDITING: " Editing",
    CurrentScreen.TASK: " Task View",
    CurrentScreen.EXITING: " Exiting",
}

_HINTS: dict[CurrentScreen, str] = {
    CurrentScreen.MAIN: _MOVE_HINT + ", [q] to quit",
    CurrentScreen.EDITING: _MOVE_HINT,
    CurrentScreen.TASK: _MOVE_HINT,
    CurrentScreen.EXITING: " [y] for yes, [n] for no",
}

_LABEL_STYLES: dict[CurrentScreen, Style] = {
    CurrentScreen.MAIN: Style(fg=Color.GRAY),
    CurrentScreen.EDITING: Style(fg=Color.GREEN),
    CurrentScreen.TASK: Style(fg=Color.YELLOW),
    CurrentScreen.EXITING: Style(fg=Color.RED),
}
