# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import os
import shutil

# Bandit: subprocess usage is intentional; the wrapper normalises arguments and
# never enables ``shell=True``.
import subprocess  # nosec B404 suppression_valid: Shell-free subprocess wrapper enforces safe execution.
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options.

    Output streams are always inherited from the parent process.
    """

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    discard_stdin: bool = False


def _normalize_args(args: Sequence[str], env: Mapping[str, str] | None) -> list[str]:
    """Normalise the subprocess argument sequence.

    The executable is looked up on the ``PATH`` of ``env`` when one is given,
    so the lookup matches the environment the child will run with.

    Args:
        args: Raw command arguments supplied by the caller.
        env: Environment the command will be launched with.

    Returns:
        list[str]: Validated argument list suitable for subprocess execution.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    search_path = env.get("PATH") if env is not None else None
    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [os.path.abspath(resolved), *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[bytes]:
    """Execute ``args`` after normalising the executable path.

    The exit status is returned, never raised; callers decide what a non-zero
    status means.

    Args:
        args: Command and argument sequence to execute.
        options: Options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        PermissionError: If the executable cannot be launched.
    """

    resolved_options = options or CommandOptions()
    normalized = _normalize_args(args, resolved_options.env)

    # Bandit: commands are built from discovered manifest paths; arguments are
    # passed as a list without shell expansion.
    return subprocess.run(  # nosec B603 - controlled arguments, not user supplied
        normalized,
        cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
        env=dict(resolved_options.env) if resolved_options.env is not None else None,
        check=False,
        stdin=subprocess.DEVNULL if resolved_options.discard_stdin else None,
    )


__all__ = [
    "CommandOptions",
    "run_command",
]
