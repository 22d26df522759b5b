# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the sweep CLI."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Sequence
from functools import partial
from pathlib import Path
from typing import Final, TextIO

from ....config import ConfigError, SweepSettings, load_settings
from ....discovery import WorkspaceLocator, warn_unreadable
from ....execution import build_invocation
from ....filesystem.paths import display_relative_path
from ...core.shared import CLIError, CLILogger
from .models import SweepCLIOptions

CONFIRM_PROMPT: Final[str] = "\nRun `scarb clean` in all listed directories? [y/N]: "
AFFIRMATIVE_ANSWERS: Final[frozenset[str]] = frozenset({"y", "yes"})


def load_sweep_settings(options: SweepCLIOptions, *, logger: CLILogger) -> SweepSettings:
    """Return run settings built from CLI ``options`` and the environment.

    Args:
        options: Parsed CLI options.
        logger: Logger receiving warnings about ignored environment values.

    Returns:
        SweepSettings: Settings for the run.

    Raises:
        CLIError: If the starting directory cannot be determined.
    """

    try:
        return load_settings(
            options.root,
            jobs=options.jobs,
            scarb=options.scarb,
            follow_symlinks=options.follow_symlinks,
            warn=logger.warn,
        )
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def locate_workspaces(settings: SweepSettings, *, logger: CLILogger) -> tuple[Path, ...]:
    """Return workspaces under ``settings.root``, reporting unreadable paths.

    Args:
        settings: Run settings supplying the root, marker and symlink policy.
        logger: Logger whose emoji preference applies to warnings.

    Returns:
        tuple[Path, ...]: Discovered workspaces.
    """

    locator = WorkspaceLocator.from_settings(
        settings,
        on_error=partial(warn_unreadable, use_emoji=logger.use_emoji),
    )
    return locator.locate(settings.root)


def emit_workspace_list(workspaces: Sequence[Path], root: Path, *, logger: CLILogger) -> None:
    """Print the discovered workspaces, relative to ``root`` where possible.

    Args:
        workspaces: Discovered workspaces.
        root: Starting directory of the search.
        logger: Logger used to emit the list.
    """

    logger.echo(f"Found {len(workspaces)} Scarb workspace(s):")
    for workspace in workspaces:
        logger.echo(f"- {display_relative_path(workspace, root)}")


def emit_dry_run_summary(workspaces: Sequence[Path], settings: SweepSettings, *, logger: CLILogger) -> None:
    """Log the command that would run in each workspace.

    Args:
        workspaces: Discovered workspaces.
        settings: Run settings used to build the commands.
        logger: Logger used to emit messages.
    """

    logger.echo("")
    for workspace in workspaces:
        invocation = build_invocation(workspace, settings)
        logger.info(f"DRY RUN: would run `{shlex.join(invocation.command)}` in {workspace}")


def confirm(prompt: str = CONFIRM_PROMPT, *, logger: CLILogger, stdin: TextIO | None = None) -> bool:
    """Ask a yes/no question and return ``True`` only for an affirmative answer.

    End of input and read errors count as "no".

    Args:
        prompt: Question written before reading the answer.
        logger: Logger used to write the prompt.
        stdin: Stream the answer is read from; defaults to ``sys.stdin``.

    Returns:
        bool: ``True`` when the trimmed, lower-cased answer is ``y`` or ``yes``.
    """

    logger.echo(prompt, end="")
    stream = stdin if stdin is not None else sys.stdin
    try:
        answer = stream.readline()
    except (OSError, ValueError) as exc:
        logger.fail(f"Failed to read input: {exc}")
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


__all__ = [
    "AFFIRMATIVE_ANSWERS",
    "CONFIRM_PROMPT",
    "confirm",
    "emit_dry_run_summary",
    "emit_workspace_list",
    "load_sweep_settings",
    "locate_workspaces",
]
