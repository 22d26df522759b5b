# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run ``scarb clean`` across workspaces on a bounded worker pool."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from ..config import SweepSettings
from ..core.runtime.process import run_command
from .models import JobOutcome, RunSummary
from .worker import CleanInvocation, RunnerCallable, build_invocation, execute_invocation


class RunnerError(RuntimeError):
    """Raised when the worker pool cannot be constructed."""


class ParallelRunner:
    """Execute one clean invocation per workspace with at most ``jobs`` in flight.

    Jobs are independent: a failing workspace never cancels the others, and
    every workspace gets exactly one :class:`JobOutcome`.
    """

    def __init__(self, settings: SweepSettings, *, runner: RunnerCallable = run_command) -> None:
        """Initialise the runner.

        Args:
            settings: Run settings supplying the executable and environment.
            runner: Command runner used to start each process.
        """

        self.settings = settings
        self.runner = runner

    def run(self, workspaces: Sequence[Path], *, jobs: int) -> RunSummary:
        """Clean every workspace and return the aggregated outcomes.

        Args:
            workspaces: Workspaces to clean; must not be empty.
            jobs: Requested concurrency; clamped to ``[1, len(workspaces)]``.

        Returns:
            RunSummary: Outcomes in the same order as ``workspaces``.

        Raises:
            ValueError: If ``workspaces`` is empty.
            RunnerError: If the worker pool cannot be constructed.
        """

        if not workspaces:
            raise ValueError("at least one workspace is required")
        invocations = [build_invocation(workspace, self.settings) for workspace in workspaces]
        workers = max(1, min(jobs, len(invocations)))
        slots: list[JobOutcome | None] = [None] * len(invocations)

        try:
            executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scarb-clean")
        except ValueError as exc:
            raise RunnerError(f"Failed to create worker pool: {exc}") from exc

        with executor:
            try:
                future_map: dict[Future[JobOutcome], int] = {
                    executor.submit(self._run_one, invocation): index for index, invocation in enumerate(invocations)
                }
            except RuntimeError as exc:
                raise RunnerError(f"Failed to start worker threads: {exc}") from exc
            for future in as_completed(future_map):
                slots[future_map[future]] = future.result()

        return RunSummary.from_outcomes([outcome for outcome in slots if outcome is not None])

    def _run_one(self, invocation: CleanInvocation) -> JobOutcome:
        return execute_invocation(invocation, self.runner)


def run_clean(
    workspaces: Sequence[Path],
    settings: SweepSettings,
    *,
    runner: RunnerCallable = run_command,
) -> RunSummary:
    """Clean ``workspaces`` using the job bound from ``settings``.

    Args:
        workspaces: Workspaces to clean; must not be empty.
        settings: Run settings supplying the job bound, executable and environment.
        runner: Command runner used to start each process.

    Returns:
        RunSummary: Aggregated outcomes.
    """

    jobs = settings.resolve_jobs(len(workspaces))
    return ParallelRunner(settings, runner=runner).run(workspaces, jobs=jobs)


__all__ = ["ParallelRunner", "RunnerError", "run_clean"]
