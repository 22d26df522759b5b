# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render job outcomes and the run aggregate."""

from __future__ import annotations

from typing import Protocol

from .models import JobOutcome, OutcomeStatus, RunSummary


class OutcomeLogger(Protocol):
    """Logging surface used to report outcomes."""

    def ok(self, message: str) -> None:
        """Emit a success line."""
        ...

    def fail(self, message: str) -> None:
        """Emit a failure line."""
        ...

    def echo(self, message: str) -> None:
        """Emit a plain line."""
        ...


def describe_outcome(outcome: JobOutcome, *, command_label: str = "scarb clean") -> str:
    """Return the one-line report for ``outcome``.

    Args:
        outcome: Outcome to describe.
        command_label: Command name shown in launch-failure messages.

    Returns:
        str: Human-readable line naming the workspace.
    """

    prefix = f"- {outcome.workspace}"
    if outcome.status is OutcomeStatus.SUCCEEDED:
        return f"{prefix}: Success."
    if outcome.status is OutcomeStatus.EXIT_CODE:
        code = outcome.returncode
        if code is not None and code < 0:
            return f"{prefix}: Failed, terminated by signal {-code}"
        return f"{prefix}: Failed with exit code: {code}"
    return f"{prefix}: Failed to execute `{command_label}`: {outcome.reason}"


def report_summary(summary: RunSummary, logger: OutcomeLogger, *, command_label: str = "scarb clean") -> None:
    """Report each outcome, then the aggregate result.

    Args:
        summary: Outcomes of the run.
        logger: Logger receiving the report lines.
        command_label: Command name shown in launch-failure messages.
    """

    for outcome in summary.outcomes:
        line = describe_outcome(outcome, command_label=command_label)
        if outcome.succeeded:
            logger.ok(line)
        else:
            logger.fail(line)

    logger.echo("")
    if summary.succeeded:
        logger.ok("Done. All workspaces cleaned successfully.")
    else:
        logger.fail(f"Done with {summary.failure_count} failure(s).")


__all__ = ["OutcomeLogger", "describe_outcome", "report_summary"]
