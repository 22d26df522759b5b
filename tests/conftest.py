# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import stat
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

TreeBuilder = Callable[[Iterable[str]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Return a helper creating files and directories under ``tmp_path``.

    Entries ending with ``/`` become directories, everything else becomes a
    file with placeholder content.
    """

    def _build(entries: Iterable[str]) -> Path:
        for entry in entries:
            target = tmp_path / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text('[package]\nname = "demo"\n', encoding="utf-8")
        return tmp_path

    return _build


@pytest.fixture
def fake_scarb(tmp_path: Path) -> Callable[..., tuple[Path, Path]]:
    """Return a factory writing a shell script that stands in for ``scarb``.

    The script appends ``<workspace name>|<args>|<SCARB_MANIFEST_PATH>`` to a
    log file and exits non-zero for workspaces named in ``failing``.
    """

    if sys.platform == "win32":
        pytest.skip("fake scarb executable requires a POSIX shell")

    def _factory(*, failing: Iterable[str] = ()) -> tuple[Path, Path]:
        bin_dir = tmp_path / "_bin"
        bin_dir.mkdir(exist_ok=True)
        log_path = bin_dir / "calls.log"
        cases = "".join(f"  {name}) exit 3 ;;\n" for name in failing)
        script = bin_dir / "scarb"
        script.write_text(
            "#!/bin/sh\n"
            'name=$(basename "$(pwd)")\n'
            f'echo "$name|$*|${{SCARB_MANIFEST_PATH:-unset}}" >> "{log_path}"\n'
            'case "$name" in\n'
            f"{cases}"
            "esac\n"
            "exit 0\n",
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script, log_path

    return _factory
