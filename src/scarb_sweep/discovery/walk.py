# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Directory traversal with caller-controlled pruning."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DirectoryListing:
    """Immediate entries of one directory visited during a walk."""

    path: Path
    files: frozenset[str]
    directories: tuple[str, ...]


DescendPredicate = Callable[[DirectoryListing], bool]
ErrorHandler = Callable[[Path, OSError], None]


def walk_pruned(
    root: Path,
    *,
    should_descend: DescendPredicate,
    on_error: ErrorHandler | None = None,
    follow_symlinks: bool = False,
) -> Iterator[DirectoryListing]:
    """Yield a listing for each directory under ``root`` in depth-first order.

    ``should_descend`` is called with each listing before any of its children
    are visited; returning ``False`` prunes the whole subtree. Children are
    visited in name order.

    Directories that cannot be listed, and entries whose type cannot be
    determined, are passed to ``on_error`` and skipped. When
    ``follow_symlinks`` is set, each directory is visited at most once by its
    canonical path, which breaks symlink cycles.

    Args:
        root: Directory the walk starts from.
        should_descend: Predicate deciding whether to visit a listing's children.
        on_error: Callback receiving unreadable paths and their errors.
        follow_symlinks: Whether symlinks to directories are traversed.

    Yields:
        DirectoryListing: Listing of each visited directory.
    """

    visited: set[str] = set()
    pending: list[Path] = [root]
    while pending:
        directory = pending.pop()
        if follow_symlinks:
            canonical = os.path.realpath(directory)
            if canonical in visited:
                continue
            visited.add(canonical)

        listing = _scan_directory(directory, on_error=on_error, follow_symlinks=follow_symlinks)
        if listing is None:
            continue
        yield listing
        if should_descend(listing):
            pending.extend(directory / name for name in reversed(listing.directories))


def _scan_directory(
    directory: Path,
    *,
    on_error: ErrorHandler | None,
    follow_symlinks: bool,
) -> DirectoryListing | None:
    """Return the immediate files and subdirectories of ``directory``.

    Args:
        directory: Directory to list.
        on_error: Callback receiving unreadable paths and their errors.
        follow_symlinks: Whether symlinks are classified by their targets.

    Returns:
        DirectoryListing | None: Listing, or ``None`` when the directory is unreadable.
    """

    files: set[str] = set()
    directories: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=follow_symlinks):
                        directories.append(entry.name)
                    elif entry.is_file(follow_symlinks=follow_symlinks):
                        files.add(entry.name)
                except OSError as exc:
                    _report(on_error, directory / entry.name, exc)
    except OSError as exc:
        _report(on_error, directory, exc)
        return None
    return DirectoryListing(path=directory, files=frozenset(files), directories=tuple(sorted(directories)))


def _report(on_error: ErrorHandler | None, path: Path, exc: OSError) -> None:
    if on_error is not None:
        on_error(path, exc)


__all__ = [
    "DescendPredicate",
    "DirectoryListing",
    "ErrorHandler",
    "walk_pruned",
]
