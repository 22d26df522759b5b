# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration for scarb-sweep runs."""

from __future__ import annotations

from .models import (
    DEFAULT_SCARB_EXECUTABLE,
    JOBS_ENV,
    MANIFEST_PATH_ENV,
    MARKER_FILE_NAME,
    SCARB_EXECUTABLE_ENV,
    ConfigError,
    SweepSettings,
    current_directory,
    load_settings,
    parse_jobs,
    resolve_jobs,
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
