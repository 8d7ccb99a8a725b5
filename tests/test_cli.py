"""Tests for the taskview CLI snapshot output."""

from __future__ import annotations

import pytest

from taskview.cli import build_parser, main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NO_COLOR", "TASKVIEW_COLOR", "TASKVIEW_TASK_POPUP", "TASKVIEW_EXIT_POPUP"):
        monkeypatch.delenv(name, raising=False)


def test_main_screen_snapshot(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--width", "40", "--height", "10", "--no-color", "--select", "1", "alpha", "beta"])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(out) == 10
    assert "Task Manager" in out[1]
    assert out[5].startswith("│* beta")
    assert "\x1b[" not in "".join(out)


def test_exit_screen_snapshot(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--width", "80", "--height", "24", "--no-color", "--screen", "exiting"])
    out = capsys.readouterr().out
    assert "Do you want to exit Task Manager?" in out
    assert " Exiting" in out


def test_task_screen_without_selection(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--width", "80", "--height", "24", "--no-color", "--screen", "task", "a"])
    assert "No task Selected" in capsys.readouterr().out


def test_out_of_range_select_is_ignored(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--width", "40", "--height", "10", "--no-color", "--select", "7", "alpha"])
    out = capsys.readouterr().out
    assert "* alpha" not in out
    assert "alpha" in out


def test_colour_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--width", "40", "--height", "10"])
    assert "\x1b[1;32m" in capsys.readouterr().out


def test_env_disables_colour(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    main(["--width", "40", "--height", "10"])
    assert "\x1b[" not in capsys.readouterr().out


def test_empty_frame(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--width", "0", "--height", "0"])
    assert capsys.readouterr().out == ""


def test_rejects_unknown_screen() -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--screen", "settings"])
    assert exc.value.code == 2
