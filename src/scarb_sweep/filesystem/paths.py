# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about filesystem paths."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

_Pathish = str | PathLike[str] | Path


def path_sort_key(path: Path) -> tuple[str, ...]:
    """Return a key ordering paths lexicographically by component.

    Args:
        path: Path to order.

    Returns:
        tuple[str, ...]: The path's components.
    """

    return path.parts


def display_relative_path(path: _Pathish, root: _Pathish) -> str:
    """Return a display-friendly representation of ``path`` relative to ``root``.

    ``root`` itself is shown as ``"."``. Paths outside ``root`` are shown in
    full rather than with ``..`` segments.

    Args:
        path: Path to present to the user.
        root: Base directory used for relativisation.

    Returns:
        str: Relative path when ``path`` lies under ``root``, otherwise the
        path as given.

    """

    candidate = Path(path)
    try:
        relative = candidate.relative_to(Path(root))
    except ValueError:
        return str(candidate)
    if not relative.parts:
        return "."
    return str(relative)


__all__ = (
    "display_relative_path",
    "path_sort_key",
)
