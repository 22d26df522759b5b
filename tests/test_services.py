# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the sweep command's helper services."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from scarb_sweep.cli.commands.sweep.services import confirm, emit_dry_run_summary
from scarb_sweep.cli.core.shared import build_cli_logger
from scarb_sweep.config import SweepSettings


class _BrokenStdin(io.StringIO):
    def readline(self, size: int | None = -1) -> str:
        raise OSError(5, "Input/output error")


@pytest.mark.parametrize(("answer", "expected"), [("y\n", True), (" Yes \n", True), ("n\n", False), ("", False)])
def test_confirm_accepts_only_yes(answer: str, expected: bool, capsys: pytest.CaptureFixture[str]) -> None:
    logger = build_cli_logger(emoji=False)

    assert confirm(logger=logger, stdin=io.StringIO(answer)) is expected
    assert capsys.readouterr().out.endswith("[y/N]: ")


def test_confirm_read_error_counts_as_no(capsys: pytest.CaptureFixture[str]) -> None:
    logger = build_cli_logger(emoji=False)

    assert confirm(logger=logger, stdin=_BrokenStdin()) is False

    captured = capsys.readouterr()
    assert "Failed to read input: [Errno 5] Input/output error" in captured.err
    assert captured.out.endswith("[y/N]: ")


def test_dry_run_lines_go_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    logger = build_cli_logger(emoji=False)
    settings = SweepSettings(root=tmp_path, environment={})
    workspace = tmp_path / "pkg"

    emit_dry_run_summary([workspace], settings, logger=logger)

    captured = capsys.readouterr()
    assert f"DRY RUN: would run `scarb --manifest-path {workspace / 'Scarb.toml'} clean` in {workspace}" in captured.out
    assert captured.err == ""
