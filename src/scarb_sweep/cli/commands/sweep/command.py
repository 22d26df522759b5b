# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that finds Scarb workspaces and cleans them."""

from __future__ import annotations

import typer

from ....execution import ParallelRunner, RunnerError, report_summary
from ...core.shared import CLIError, build_cli_logger
from .models import (
    DEBUG_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    FOLLOW_SYMLINKS_OPTION,
    JOBS_OPTION,
    ROOT_OPTION,
    SCARB_OPTION,
    YES_OPTION,
    build_sweep_options,
)
from .services import (
    confirm,
    emit_dry_run_summary,
    emit_workspace_list,
    load_sweep_settings,
    locate_workspaces,
)


def sweep(
    root: ROOT_OPTION = None,
    jobs: JOBS_OPTION = None,
    scarb: SCARB_OPTION = None,
    yes: YES_OPTION = False,
    dry_run: DRY_RUN_OPTION = False,
    follow_symlinks: FOLLOW_SYMLINKS_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Run `scarb clean` in every Scarb workspace below the starting directory.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = build_sweep_options(
        root=root,
        jobs=jobs,
        scarb=scarb,
        assume_yes=yes,
        dry_run=dry_run,
        follow_symlinks=follow_symlinks,
        emoji=emoji,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    try:
        settings = load_sweep_settings(options, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    logger.debug(f"root={settings.root} jobs={settings.jobs} scarb={settings.scarb}")

    workspaces = locate_workspaces(settings, logger=logger)
    if not workspaces:
        logger.echo(f"No Scarb workspaces found under {settings.root}.")
        raise typer.Exit(code=0)

    emit_workspace_list(workspaces, settings.root, logger=logger)
    if options.dry_run:
        emit_dry_run_summary(workspaces, settings, logger=logger)
        raise typer.Exit(code=0)

    if not options.assume_yes and not confirm(logger=logger):
        logger.echo("Aborted.")
        raise typer.Exit(code=0)

    job_count = settings.resolve_jobs(len(workspaces))
    logger.echo(f"\nRunning `scarb clean` in parallel with up to {job_count} job(s)...")
    try:
        summary = ParallelRunner(settings).run(workspaces, jobs=job_count)
    except RunnerError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    report_summary(summary, logger)
    raise typer.Exit(code=summary.exit_code)


__all__ = ["sweep"]
