# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate Scarb workspaces beneath a starting directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import MARKER_FILE_NAME, SweepSettings
from ..core.logging import warn
from ..filesystem.paths import path_sort_key
from .walk import DirectoryListing, ErrorHandler, walk_pruned


def warn_unreadable(path: Path, exc: OSError, *, use_emoji: bool = True) -> None:
    """Report an unreadable path on the diagnostic stream.

    Args:
        path: Path that could not be read.
        exc: Error raised while reading it.
        use_emoji: Flag indicating whether emoji output is desired.
    """

    reason = exc.strerror or str(exc)
    warn(f"Skipping unreadable path {path}: {reason}", use_emoji=use_emoji)


@dataclass(slots=True)
class WorkspaceLocator:
    """Find directories that directly contain a marker file.

    Traversal stops at every match, so a workspace nested inside another one
    is never reported on its own.
    """

    marker: str = MARKER_FILE_NAME
    follow_symlinks: bool = False
    on_error: ErrorHandler = field(default=warn_unreadable)

    @classmethod
    def from_settings(cls, settings: SweepSettings, *, on_error: ErrorHandler | None = None) -> WorkspaceLocator:
        """Return a locator configured from ``settings``.

        Args:
            settings: Run settings supplying the marker and symlink policy.
            on_error: Optional replacement for the default unreadable-path reporter.

        Returns:
            WorkspaceLocator: Configured locator.
        """

        return cls(
            marker=settings.marker,
            follow_symlinks=settings.follow_symlinks,
            on_error=on_error or warn_unreadable,
        )

    def locate(self, root: Path) -> tuple[Path, ...]:
        """Return workspaces under ``root`` ordered by path components.

        Args:
            root: Directory the search starts from.

        Returns:
            tuple[Path, ...]: Duplicate-free workspaces, none an ancestor of another.
        """

        found: set[Path] = set()
        for listing in walk_pruned(
            root,
            should_descend=self._should_descend,
            on_error=self.on_error,
            follow_symlinks=self.follow_symlinks,
        ):
            if self.marker in listing.files:
                found.add(listing.path)
        return tuple(sorted(found, key=path_sort_key))

    def _should_descend(self, listing: DirectoryListing) -> bool:
        return self.marker not in listing.files


def find_workspaces(
    root: Path,
    *,
    marker: str = MARKER_FILE_NAME,
    follow_symlinks: bool = False,
    on_error: ErrorHandler | None = None,
) -> tuple[Path, ...]:
    """Return Scarb workspaces under ``root``.

    Args:
        root: Directory the search starts from.
        marker: Manifest file name identifying a workspace.
        follow_symlinks: Whether symlinked directories are traversed.
        on_error: Callback receiving unreadable paths; defaults to a warning.

    Returns:
        tuple[Path, ...]: Workspaces ordered by path components.
    """

    locator = WorkspaceLocator(
        marker=marker,
        follow_symlinks=follow_symlinks,
        on_error=on_error or warn_unreadable,
    )
    return locator.locate(root)


__all__ = ["WorkspaceLocator", "find_workspaces", "warn_unreadable"]
