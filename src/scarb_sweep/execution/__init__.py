# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parallel execution of ``scarb clean``."""

from __future__ import annotations

from .models import JobOutcome, OutcomeStatus, RunSummary
from .reporting import describe_outcome, report_summary
from .runner import ParallelRunner, RunnerError, run_clean
from .worker import CleanInvocation, RunnerCallable, build_invocation, execute_invocation

__all__ = [
    "CleanInvocation",
    "JobOutcome",
    "OutcomeStatus",
    "ParallelRunner",
    "RunSummary",
    "RunnerCallable",
    "RunnerError",
    "build_invocation",
    "describe_outcome",
    "execute_invocation",
    "report_summary",
    "run_clean",
]
