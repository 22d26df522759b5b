# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for user-facing logging helpers and the console manager."""

from __future__ import annotations

import threading

import pytest

from scarb_sweep.cli.core.shared import build_cli_logger
from scarb_sweep.core.logging import echo, emoji, fail, info, ok, warn
from scarb_sweep.runtime.console import RichConsoleManager, detect_tty


def test_success_and_info_go_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    ok("cleaned", use_emoji=False)
    info("listing", use_emoji=False)

    captured = capsys.readouterr()
    assert captured.out == "cleaned\nlisting\n"
    assert captured.err == ""


def test_warnings_and_failures_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    warn("careful", use_emoji=False)
    fail("broken", use_emoji=False)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "careful\nbroken\n"


def test_emoji_prefix_is_optional(capsys: pytest.CaptureFixture[str]) -> None:
    ok("done", use_emoji=True)

    assert capsys.readouterr().out.startswith("✅ done")
    assert emoji("✅", False) == ""


def test_messages_are_not_parsed_as_markup(capsys: pytest.CaptureFixture[str]) -> None:
    echo("Run `scarb clean`? [y/N]: ", end="")

    assert capsys.readouterr().out == "Run `scarb clean`? [y/N]: "


def test_concurrent_lines_do_not_interleave(capsys: pytest.CaptureFixture[str]) -> None:
    def _emit(index: int) -> None:
        for _ in range(20):
            ok(f"- workspace-{index}: Success.", use_emoji=False)

    threads = [threading.Thread(target=_emit, args=(index,)) for index in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 80
    assert all(line.startswith("- workspace-") and line.endswith(": Success.") for line in lines)


def test_console_manager_caches_consoles() -> None:
    manager = RichConsoleManager()

    first = manager.get(color=False, emoji=False, stream="stderr")

    assert manager.get(color=False, emoji=False, stream="stderr") is first
    assert manager.get(color=False, emoji=False, stream="stdout") is not first
    assert first.stderr is True


def test_detect_tty_is_false_under_capture() -> None:
    assert detect_tty("stdout") is False


def test_cli_logger_debug_is_gated(capsys: pytest.CaptureFixture[str]) -> None:
    quiet = build_cli_logger(emoji=False, debug=False, no_color=True)
    loud = build_cli_logger(emoji=False, debug=True, no_color=True)

    quiet.debug("jobs=2")
    loud.debug("jobs=2 scarb=scarb")

    err = capsys.readouterr().err
    assert err.count("[debug]") == 1
    assert "jobs=2 scarb=scarb" in err
