# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import typer

from .commands import register_commands

app = typer.Typer(
    help="Find Scarb workspaces and run `scarb clean` in each of them.",
    add_completion=False,
    no_args_is_help=False,
)
register_commands(app)


def main() -> None:
    """Run the CLI application."""

    app(prog_name="scarb-sweep")


__all__ = ["app", "main"]
