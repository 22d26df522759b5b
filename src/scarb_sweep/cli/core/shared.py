# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.text import Text

from ...core.logging import OUTPUT_LOCK
from ...core.logging import echo as core_echo
from ...core.logging import fail as core_fail
from ...core.logging import info as core_info
from ...core.logging import ok as core_ok
from ...core.logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences.

        Args:
            message: Text describing the failure state.
        """

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences.

        Args:
            message: Text describing the warning condition.
        """

        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences.

        Args:
            message: Text describing the successful state.
        """

        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        """Log an informational message on stdout honouring emoji preferences.

        Args:
            message: Text describing the informational state.
        """

        core_info(message, use_emoji=self.use_emoji)

    def echo(self, message: str, *, end: str = "\n") -> None:
        """Write ``message`` to stdout without decoration.

        Args:
            message: Text written to standard output.
            end: Terminator; pass ``""`` to leave the cursor after a prompt.
        """

        core_echo(message, end=end)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        with OUTPUT_LOCK:
            self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger whose debug output goes to a dedicated stderr console.
    """

    console = Console(no_color=no_color, highlight=False, stderr=True, soft_wrap=True)
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


__all__: Final = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
]
