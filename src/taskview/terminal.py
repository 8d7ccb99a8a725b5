"""Terminal output: the ``Terminal`` protocol and differential frame output.

``FramePresenter`` writes painted frames to a ``Terminal``.  The first frame,
and any frame after the terminal changed size, is a full redraw; otherwise
only rows that differ from the previous frame are rewritten.
"""

from __future__ import annotations

import logging
import shutil
import sys
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_CLEAR_TO_EOL = "\x1b[K"
_MOVE_TO_FMT = "\x1b[{};1H"


def move_to_row(row: int) -> str:
    """Escape sequence that moves the cursor to column 1 of 0-based *row*."""
    return _MOVE_TO_FMT.format(row + 1)


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal a frame is drawn on."""

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def write(self, data: str) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...


class StreamTerminal:
    """A ``Terminal`` over a text stream (stdout by default).

    Only writes escape sequences; raw mode and the alternate screen are left
    to whoever owns the process's terminal.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    @property
    def columns(self) -> int:
        return shutil.get_terminal_size().columns

    @property
    def rows(self) -> int:
        return shutil.get_terminal_size().lines

    def write(self, data: str) -> None:
        self._stream.write(data)
        self._stream.flush()

    def hide_cursor(self) -> None:
        self.write(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(_SHOW_CURSOR)

    def clear_screen(self) -> None:
        self.write(_CLEAR_SCREEN)


# ---------------------------------------------------------------------------
# FramePresenter
# ---------------------------------------------------------------------------


class FramePresenter:
    """Writes successive frames to *terminal*, redrawing only what changed."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self._previous_lines: list[str] = []
        self._previous_size: tuple[int, int] | None = None
        self._full_redraw_count = 0

    @property
    def full_redraws(self) -> int:
        """Number of full (non-differential) redraws performed."""
        return self._full_redraw_count

    def reset(self) -> None:
        """Forget the previous frame so the next one is drawn in full."""
        self._previous_lines = []
        self._previous_size = None

    def stop(self) -> None:
        """Restore the cursor and forget the previous frame."""
        self.terminal.show_cursor()
        self.reset()

    def present(self, lines: list[str], size: tuple[int, int] | None = None) -> None:
        """Write *lines* as the new frame.

        *size* is the ``(columns, rows)`` the frame was painted for and
        defaults to the terminal's current size.
        """
        if size is None:
            size = (self.terminal.columns, self.terminal.rows)

        out: list[str] = []
        if size != self._previous_size:
            self._full_redraw_count += 1
            logger.debug("Full redraw at %dx%d", size[0], size[1])
            self.terminal.hide_cursor()
            self.terminal.clear_screen()
            for row, line in enumerate(lines):
                out.append(move_to_row(row))
                out.append(line)
                out.append(_CLEAR_TO_EOL)
        else:
            total = max(len(lines), len(self._previous_lines))
            for row in range(total):
                new_line = lines[row] if row < len(lines) else ""
                old_line = (
                    self._previous_lines[row] if row < len(self._previous_lines) else ""
                )
                if new_line == old_line:
                    continue
                out.append(move_to_row(row))
                out.append(new_line)
                out.append(_CLEAR_TO_EOL)

        if out:
            self.terminal.write("".join(out))

        self._previous_lines = list(lines)
        self._previous_size = size
