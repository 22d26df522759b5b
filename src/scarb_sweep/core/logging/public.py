# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support.

Every helper writes through :data:`OUTPUT_LOCK` so that lines emitted from
worker threads never interleave mid-line. ``info``/``ok`` target stdout while
``warn``/``fail`` target stderr.
"""

from __future__ import annotations

import threading
from typing import Final

from rich.text import Text

from scarb_sweep.runtime.console.manager import StreamName, detect_tty, get_console_manager

OUTPUT_LOCK: Final[threading.RLock] = threading.RLock()


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stream: StreamName = "stdout",
    end: str = "\n",
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stream: Standard stream receiving the message.
        end: Terminator written after the message.
    """

    color_enabled = detect_tty(stream) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stream=stream)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    with OUTPUT_LOCK:
        console.print(text, end=end)
        console.file.flush()


def echo(msg: str, *, end: str = "\n", stream: StreamName = "stdout") -> None:
    """Write ``msg`` verbatim without styling or emoji.

    Args:
        msg: Message text to write.
        end: Terminator written after the message; ``""`` keeps the cursor on the line.
        stream: Standard stream receiving the message.
    """

    _print_line(msg, style=None, use_emoji=False, use_color=False, stream=stream, end=end)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message on stdout.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message on stdout.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message on stderr.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(
        f"{prefix}{msg}",
        style="yellow",
        use_emoji=use_emoji,
        use_color=use_color,
        stream="stderr",
    )


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message on stderr.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("❌ ", use_emoji)
    _print_line(
        f"{prefix}{msg}",
        style="red",
        use_emoji=use_emoji,
        use_color=use_color,
        stream="stderr",
    )


__all__ = [
    "OUTPUT_LOCK",
    "echo",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
