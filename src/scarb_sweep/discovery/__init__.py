# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Workspace discovery."""

from __future__ import annotations

from .walk import DescendPredicate, DirectoryListing, ErrorHandler, walk_pruned
from .workspaces import WorkspaceLocator, find_workspaces, warn_unreadable

__all__ = [
    "DescendPredicate",
    "DirectoryListing",
    "ErrorHandler",
    "WorkspaceLocator",
    "find_workspaces",
    "walk_pruned",
    "warn_unreadable",
]
