"""Entry point for the taskview CLI: prints a single frame to stdout."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys

from taskview.config import Settings
from taskview.screen import CurrentScreen
from taskview.selection import TaskList
from taskview.view import frame_lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskview", description="taskview: render one frame of the task viewer"
    )
    parser.add_argument("tasks", nargs="*", help="Task texts, in list order")
    parser.add_argument("--width", type=int, default=None, help="Frame width (default: terminal width)")
    parser.add_argument("--height", type=int, default=None, help="Frame height (default: terminal height)")
    parser.add_argument(
        "--screen",
        default=CurrentScreen.MAIN.value,
        choices=[s.value for s in CurrentScreen],
        help="Screen mode to draw (default: main)",
    )
    parser.add_argument("--select", type=int, default=None, help="Index of the selected task")
    parser.add_argument("--no-color", action="store_true", help="Print without ANSI colours")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = Settings.from_env()
    if args.no_color:
        settings.color = False

    size = shutil.get_terminal_size()
    width = args.width if args.width is not None else size.columns
    height = args.height if args.height is not None else size.lines

    tasks = TaskList(args.tasks)
    if args.select is not None:
        tasks.select_index(args.select)

    lines = frame_lines(width, height, CurrentScreen(args.screen), tasks, settings)
    sys.stdout.write("\n".join(lines))
    if lines:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
