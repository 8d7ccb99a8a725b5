"""Viewer settings, with overrides read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

ENV_COLOR = "TASKVIEW_COLOR"
ENV_TASK_POPUP = "TASKVIEW_TASK_POPUP"
ENV_EXIT_POPUP = "TASKVIEW_EXIT_POPUP"

_FALSY = {"0", "false", "no", "off"}


@dataclass
class Settings:
    """Rendering options.

    Popup sizes are ``(percent_x, percent_y)`` of the whole viewport.
    """

    color: bool = True
    task_popup: tuple[int, int] = (20, 20)
    exit_popup: tuple[int, int] = (60, 25)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``NO_COLOR`` and the ``TASKVIEW_*`` variables.

        Values that cannot be parsed are logged and the default is kept.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        if "NO_COLOR" in env:
            settings.color = False
        color = env.get(ENV_COLOR)
        if color is not None:
            settings.color = color.strip().lower() not in _FALSY

        task_popup = _parse_popup(env.get(ENV_TASK_POPUP), ENV_TASK_POPUP)
        if task_popup is not None:
            settings.task_popup = task_popup
        exit_popup = _parse_popup(env.get(ENV_EXIT_POPUP), ENV_EXIT_POPUP)
        if exit_popup is not None:
            settings.exit_popup = exit_popup

        return settings


def _parse_popup(value: str | None, name: str) -> tuple[int, int] | None:
    """Parse ``"<x>x<y>"`` into clamped percentages.

    * ``None``     -> ``None``
    * ``"20x20"``  -> ``(20, 20)``
    * ``"150x10"`` -> ``(100, 10)``
    * anything else logs a warning and returns ``None``
    """
    if value is None:
        return None
    parts = value.strip().lower().split("x")
    try:
        if len(parts) != 2:
            raise ValueError(value)
        x, y = (int(p) for p in parts)
    except ValueError:
        logger.warning("Ignoring %s=%r: expected <x>x<y> percentages", name, value)
        return None
    return max(0, min(100, x)), max(0, min(100, y))
