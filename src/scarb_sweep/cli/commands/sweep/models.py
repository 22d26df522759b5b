# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared data structures for the sweep CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        exists=True,
        file_okay=False,
        help="Directory to search for Scarb workspaces (default: current directory).",
    ),
]
JOBS_OPTION = Annotated[
    int | None,
    typer.Option(
        "--jobs",
        "-j",
        min=1,
        help="Maximum concurrent `scarb clean` runs (overrides SCARB_CLEAN_JOBS).",
    ),
]
SCARB_OPTION = Annotated[
    str | None,
    typer.Option(
        "--scarb",
        help="Scarb executable to invoke (default: $SCARB or `scarb`).",
    ),
]
YES_OPTION = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Skip the confirmation prompt."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="List workspaces and commands without running them."),
]
FOLLOW_SYMLINKS_OPTION = Annotated[
    bool,
    typer.Option(
        "--follow-symlinks/--no-follow-symlinks",
        help="Descend into symlinked directories while searching.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print debug details to stderr."),
]


@dataclass(slots=True)
class SweepCLIOptions:
    """Capture CLI overrides supplied to the sweep command."""

    root: Path | None
    jobs: int | None
    scarb: str | None
    assume_yes: bool
    dry_run: bool
    follow_symlinks: bool
    emoji: bool
    debug: bool


def build_sweep_options(
    *,
    root: Path | None,
    jobs: int | None,
    scarb: str | None,
    assume_yes: bool,
    dry_run: bool,
    follow_symlinks: bool,
    emoji: bool,
    debug: bool,
) -> SweepCLIOptions:
    """Construct ``SweepCLIOptions`` from Typer callback parameters."""

    executable = scarb.strip() if scarb else None
    return SweepCLIOptions(
        root=root,
        jobs=jobs,
        scarb=executable or None,
        assume_yes=assume_yes,
        dry_run=dry_run,
        follow_symlinks=follow_symlinks,
        emoji=emoji,
        debug=debug,
    )


__all__ = [
    "DEBUG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "FOLLOW_SYMLINKS_OPTION",
    "JOBS_OPTION",
    "ROOT_OPTION",
    "SCARB_OPTION",
    "SweepCLIOptions",
    "YES_OPTION",
    "build_sweep_options",
]
