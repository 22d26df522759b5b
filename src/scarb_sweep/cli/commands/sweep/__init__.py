# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Sweep CLI command package."""

from __future__ import annotations

import typer

from .command import sweep

__all__ = ["register", "sweep"]


def register(app: typer.Typer) -> None:
    """Register the sweep command on the provided Typer application.

    Args:
        app: Typer application receiving the command.
    """

    app.command(name="sweep", help="Run `scarb clean` in every Scarb workspace below the starting directory.")(sweep)
