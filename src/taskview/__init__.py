"""taskview: terminal task list viewer with a deterministic layout engine."""

# Canvas
from taskview.canvas import Buffer, Cell, paint

# Composition
from taskview.compose import render

# Configuration
from taskview.config import Settings

# Geometry
from taskview.geometry import (
    Direction,
    Length,
    Min,
    Percentage,
    Rect,
    centered_rect,
    footer_layout,
    main_layout,
    split,
)

# Screen state
from taskview.screen import INITIAL_SCREEN, CurrentScreen

# Selection model
from taskview.selection import NO_SELECTION, TaskList

# Styling
from taskview.style import DOUBLE, PLAIN, ROUNDED, BorderSet, Borders, Color, Style

# Terminal output
from taskview.terminal import FramePresenter, StreamTerminal, Terminal

# Utilities
from taskview.utils import truncate_to_width, visible_width, wrap_text

# Per-frame glue
from taskview.view import TaskView, frame_lines

# Frame elements
from taskview.widgets import Block, FrameOutput, ListView, Paragraph, Placement

__all__ = [
    # Canvas
    "Buffer",
    "Cell",
    "paint",
    # Composition
    "render",
    # Configuration
    "Settings",
    # Geometry
    "Direction",
    "Length",
    "Min",
    "Percentage",
    "Rect",
    "centered_rect",
    "footer_layout",
    "main_layout",
    "split",
    # Screen state
    "CurrentScreen",
    "INITIAL_SCREEN",
    # Selection model
    "NO_SELECTION",
    "TaskList",
    # Styling
    "BorderSet",
    "Borders",
    "Color",
    "DOUBLE",
    "PLAIN",
    "ROUNDED",
    "Style",
    # Terminal output
    "FramePresenter",
    "StreamTerminal",
    "Terminal",
    # Utilities
    "truncate_to_width",
    "visible_width",
    "wrap_text",
    # Per-frame glue
    "TaskView",
    "frame_lines",
    # Frame elements
    "Block",
    "FrameOutput",
    "ListView",
    "Paragraph",
    "Placement",
]
