# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Outcome models for ``scarb clean`` jobs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OutcomeStatus(str, Enum):
    """Enumerate the ways a clean job can finish."""

    SUCCEEDED = "succeeded"
    EXIT_CODE = "failed-with-exit-code"
    LAUNCH_FAILED = "failed-to-launch"


@dataclass(frozen=True, slots=True)
class JobOutcome:
    """Result of running the clean command for one workspace."""

    workspace: Path
    status: OutcomeStatus
    returncode: int | None = None
    reason: str | None = None

    @classmethod
    def success(cls, workspace: Path) -> JobOutcome:
        """Return an outcome for a command that exited with status 0."""

        return cls(workspace=workspace, status=OutcomeStatus.SUCCEEDED, returncode=0)

    @classmethod
    def exited(cls, workspace: Path, returncode: int) -> JobOutcome:
        """Return an outcome for a command that exited with ``returncode``.

        Args:
            workspace: Workspace the command ran in.
            returncode: Exit status reported by the process.

        Returns:
            JobOutcome: Success when ``returncode`` is zero, otherwise a failure.
        """

        if returncode == 0:
            return cls.success(workspace)
        return cls(workspace=workspace, status=OutcomeStatus.EXIT_CODE, returncode=returncode)

    @classmethod
    def launch_failed(cls, workspace: Path, reason: str) -> JobOutcome:
        """Return an outcome for a command that could not be started."""

        return cls(workspace=workspace, status=OutcomeStatus.LAUNCH_FAILED, reason=reason)

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when the clean command exited successfully."""

        return self.status is OutcomeStatus.SUCCEEDED


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Every job outcome of one run, in workspace order."""

    outcomes: tuple[JobOutcome, ...] = field(default_factory=tuple)

    @classmethod
    def from_outcomes(cls, outcomes: Sequence[JobOutcome]) -> RunSummary:
        """Build a summary from ``outcomes``."""

        return cls(outcomes=tuple(outcomes))

    @property
    def successes(self) -> tuple[JobOutcome, ...]:
        """Return the successful outcomes."""

        return tuple(outcome for outcome in self.outcomes if outcome.succeeded)

    @property
    def failures(self) -> tuple[JobOutcome, ...]:
        """Return the failed outcomes, launch failures included."""

        return tuple(outcome for outcome in self.outcomes if not outcome.succeeded)

    @property
    def failure_count(self) -> int:
        """Return the number of failed outcomes."""

        return len(self.failures)

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when every job succeeded."""

        return self.failure_count == 0

    @property
    def exit_code(self) -> int:
        """Return the process exit code for this summary."""

        return 0 if self.succeeded else 1


__all__ = ["JobOutcome", "OutcomeStatus", "RunSummary"]
