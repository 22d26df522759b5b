# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build and execute the ``scarb clean`` command for a single workspace."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Protocol, runtime_checkable

from ..config import SweepSettings
from ..core.runtime.process import CommandOptions
from .models import JobOutcome

CLEAN_SUBCOMMAND = "clean"
MANIFEST_PATH_FLAG = "--manifest-path"


@runtime_checkable
class RunnerCallable(Protocol):
    """Callable protocol for invoking external commands."""

    def __call__(
        self,
        cmd: Sequence[str],
        *,
        options: CommandOptions | None = None,
    ) -> CompletedProcess[bytes]:
        """Execute ``cmd`` returning a completed subprocess.

        Args:
            cmd: Command to execute including executable and arguments.
            options: Working directory, environment and stream settings.

        Returns:
            CompletedProcess[bytes]: Completed subprocess.
        """
        ...


@dataclass(frozen=True, slots=True)
class CleanInvocation:
    """Everything needed to run ``scarb clean`` in one workspace."""

    workspace: Path
    manifest_path: Path
    command: tuple[str, ...]
    env: Mapping[str, str]

    @property
    def options(self) -> CommandOptions:
        """Return process options: run in the workspace, inherit output, no stdin."""

        return CommandOptions(
            cwd=self.workspace,
            env=self.env,
            discard_stdin=True,
        )


def build_invocation(workspace: Path, settings: SweepSettings) -> CleanInvocation:
    """Return the clean invocation for ``workspace``.

    Args:
        workspace: Directory containing the manifest.
        settings: Run settings supplying the executable and environment.

    Returns:
        CleanInvocation: Invocation with an explicit ``--manifest-path``.
    """

    manifest_path = workspace / settings.marker
    return CleanInvocation(
        workspace=workspace,
        manifest_path=manifest_path,
        command=(settings.scarb, MANIFEST_PATH_FLAG, str(manifest_path), CLEAN_SUBCOMMAND),
        env=settings.child_environment(),
    )


def execute_invocation(invocation: CleanInvocation, runner: RunnerCallable) -> JobOutcome:
    """Run ``invocation`` and convert the result into a :class:`JobOutcome`.

    Args:
        invocation: Invocation to execute.
        runner: Command runner used to start the process.

    Returns:
        JobOutcome: Outcome of the invocation; launch errors are captured, not raised.
    """

    try:
        completed = runner(list(invocation.command), options=invocation.options)
    except OSError as exc:
        return JobOutcome.launch_failed(invocation.workspace, reason=str(exc))
    return JobOutcome.exited(invocation.workspace, completed.returncode)


__all__ = [
    "CLEAN_SUBCOMMAND",
    "MANIFEST_PATH_FLAG",
    "CleanInvocation",
    "RunnerCallable",
    "build_invocation",
    "execute_invocation",
]
