# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""User-facing logging helpers."""

from __future__ import annotations

from .public import OUTPUT_LOCK, echo, emoji, fail, info, ok, warn

__all__ = [
    "OUTPUT_LOCK",
    "echo",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
