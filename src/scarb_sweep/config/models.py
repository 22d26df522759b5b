# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for scarb-sweep.

Process-wide state (the starting directory and the environment) is read once
by :func:`load_settings` and carried in :class:`SweepSettings` from then on.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from ..core.logging import warn as core_warn

MARKER_FILE_NAME: Final[str] = "Scarb.toml"
DEFAULT_SCARB_EXECUTABLE: Final[str] = "scarb"
JOBS_ENV: Final[str] = "SCARB_CLEAN_JOBS"
SCARB_EXECUTABLE_ENV: Final[str] = "SCARB"
MANIFEST_PATH_ENV: Final[str] = "SCARB_MANIFEST_PATH"

WarnCallback = Callable[[str], None]


class ConfigError(Exception):
    """Raised when startup configuration cannot be determined."""


class SweepSettings(BaseModel):
    """Settings for one discovery-and-clean run."""

    model_config = ConfigDict(frozen=True)

    root: Path
    jobs: int | None = Field(default=None, ge=1)
    scarb: str = DEFAULT_SCARB_EXECUTABLE
    marker: str = MARKER_FILE_NAME
    manifest_env: str = MANIFEST_PATH_ENV
    follow_symlinks: bool = False
    environment: dict[str, str] = Field(default_factory=dict)

    def child_environment(self) -> dict[str, str]:
        """Return the environment for ``scarb`` child processes.

        The manifest-path override is dropped so the explicit
        ``--manifest-path`` argument always wins.

        Returns:
            dict[str, str]: Environment snapshot without ``manifest_env``.
        """

        return {key: value for key, value in self.environment.items() if key != self.manifest_env}

    def resolve_jobs(self, workspace_count: int) -> int:
        """Return the worker count for ``workspace_count`` workspaces.

        Args:
            workspace_count: Number of workspaces that will be cleaned.

        Returns:
            int: Job bound clamped to ``[1, workspace_count]``.
        """

        return resolve_jobs(self.jobs, workspace_count)


def resolve_jobs(requested: int | None, workspace_count: int) -> int:
    """Return the job bound for ``workspace_count`` items.

    Args:
        requested: Explicit job count, or ``None`` for one job per workspace.
        workspace_count: Number of work items.

    Returns:
        int: ``requested`` (or ``workspace_count``) clamped to ``[1, workspace_count]``.
    """

    upper = max(1, workspace_count)
    if requested is None:
        return upper
    return max(1, min(requested, upper))


def parse_jobs(raw: str | None, *, warn: WarnCallback | None = None) -> int | None:
    """Parse a ``SCARB_CLEAN_JOBS`` value.

    Invalid values are reported through ``warn`` and ignored.

    Args:
        raw: Raw environment value, or ``None`` when unset.
        warn: Callback receiving diagnostics for ignored values.

    Returns:
        int | None: Positive job count, or ``None`` when unset or invalid.
    """

    if raw is None:
        return None
    report = warn or partial(core_warn, use_emoji=True)
    text = raw.strip()
    # ASCII digits only, with an optional leading "+".
    digits = text.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        report(f"Ignoring invalid {JOBS_ENV} value: {raw}")
        return None
    value = int(digits)
    if value == 0:
        report(f"Ignoring {JOBS_ENV}=0, value must be >= 1.")
        return None
    return value


def current_directory() -> Path:
    """Return the process working directory.

    Returns:
        Path: Absolute working directory.

    Raises:
        ConfigError: If the working directory cannot be determined.
    """

    try:
        return Path.cwd()
    except OSError as exc:
        raise ConfigError(f"Failed to determine current directory: {exc}") from exc


def load_settings(
    root: Path | None = None,
    *,
    jobs: int | None = None,
    scarb: str | None = None,
    follow_symlinks: bool = False,
    env: Mapping[str, str] | None = None,
    warn: WarnCallback | None = None,
) -> SweepSettings:
    """Build :class:`SweepSettings` from explicit overrides and the environment.

    Args:
        root: Starting directory; defaults to the current directory.
        jobs: Explicit job count taking precedence over ``SCARB_CLEAN_JOBS``.
        scarb: Executable to invoke; defaults to ``$SCARB`` or ``scarb``.
        follow_symlinks: Whether discovery descends into symlinked directories.
        env: Environment mapping; defaults to a snapshot of :data:`os.environ`.
        warn: Callback receiving diagnostics for ignored environment values.

    Returns:
        SweepSettings: Immutable settings for the run.

    Raises:
        ConfigError: If the starting directory cannot be determined.
    """

    environment = dict(os.environ if env is None else env)
    start = current_directory() if root is None else root
    if not start.is_absolute():
        start = current_directory() / start

    requested_jobs = jobs if jobs is not None else parse_jobs(environment.get(JOBS_ENV), warn=warn)
    executable = scarb or environment.get(SCARB_EXECUTABLE_ENV) or DEFAULT_SCARB_EXECUTABLE

    return SweepSettings(
        root=Path(os.path.normpath(start)),
        jobs=requested_jobs,
        scarb=executable,
        follow_symlinks=follow_symlinks,
        environment=environment,
    )


__all__ = [
    "ConfigError",
    "DEFAULT_SCARB_EXECUTABLE",
    "JOBS_ENV",
    "MANIFEST_PATH_ENV",
    "MARKER_FILE_NAME",
    "SCARB_EXECUTABLE_ENV",
    "SweepSettings",
    "current_directory",
    "load_settings",
    "parse_jobs",
    "resolve_jobs",
]
