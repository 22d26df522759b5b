# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console

StreamName = Literal["stdout", "stderr"]


def detect_tty(stream: StreamName = "stdout") -> bool:
    """Return ``True`` when ``stream`` appears to be backed by a terminal.

    Args:
        stream: Name of the standard stream to inspect.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    handle = sys.stderr if stream == "stderr" else sys.stdout
    try:
        return handle.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by stream and presentation flags."""

    def __init__(self) -> None:
        """Initialise the manager with an in-memory cache keyed by presentation flags."""

        self._cache: dict[tuple[StreamName, bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stream: StreamName = "stdout") -> Console:
        """Return a Rich console configured for ``color`` and ``emoji`` preferences.

        The console does not bind a file handle, so it always writes to the
        current ``sys.stdout``/``sys.stderr``. Test runners that swap those
        streams therefore capture its output.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji glyphs.
            stream: Standard stream the console writes to.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty(stream)
        key = (stream, color, emoji, tty)
        if key not in self._cache:
            color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
                "auto" if color and tty else None
            )
            self._cache[key] = Console(
                color_system=color_system,
                force_terminal=tty,
                no_color=not (color and tty),
                emoji=emoji,
                highlight=False,
                soft_wrap=True,
                stderr=stream == "stderr",
            )
        return self._cache[key]


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return a cached :class:`RichConsoleManager` instance.

    Returns:
        RichConsoleManager: Singleton console manager bound to the process.
    """

    return RichConsoleManager()


__all__ = [
    "RichConsoleManager",
    "StreamName",
    "detect_tty",
    "get_console_manager",
]
