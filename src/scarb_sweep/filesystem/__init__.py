# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem utilities for path handling."""

from __future__ import annotations

from .paths import display_relative_path, path_sort_key

__all__ = [
    "display_relative_path",
    "path_sort_key",
]
