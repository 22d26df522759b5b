# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the scarb-sweep command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from scarb_sweep.cli.app import app
from scarb_sweep.execution import runner as runner_module

SCENARIO = [
    "repo/A/Scarb.toml",
    "repo/A/sub/Scarb.toml",
    "repo/B/Scarb.toml",
    "repo/C/no-manifest/",
]


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _read_calls(log_path: Path) -> list[str]:
    if not log_path.exists():
        return []
    return sorted(log_path.read_text(encoding="utf-8").splitlines())


def test_failed_workspace_sets_exit_code(runner: CliRunner, make_tree, fake_scarb) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, log_path = fake_scarb(failing=["A"])

    result = runner.invoke(
        app,
        ["--root", str(root), "--scarb", str(script), "--no-emoji"],
        input="y\n",
        env={"SCARB_CLEAN_JOBS": "1", "SCARB_MANIFEST_PATH": "/elsewhere/Scarb.toml"},
    )

    assert result.exit_code == 1, result.output
    output = result.output
    assert "Found 2 Scarb workspace(s):" in output
    assert "- A\n" in output
    assert "- B\n" in output
    assert "sub" not in output
    assert "Running `scarb clean` in parallel with up to 1 job(s)..." in output
    assert f"- {root / 'A'}: Failed with exit code: 3" in output
    assert f"- {root / 'B'}: Success." in output
    assert "Done with 1 failure(s)." in output
    assert _read_calls(log_path) == [
        f"A|--manifest-path {root / 'A' / 'Scarb.toml'} clean|unset",
        f"B|--manifest-path {root / 'B' / 'Scarb.toml'} clean|unset",
    ]


def test_all_workspaces_cleaned(runner: CliRunner, make_tree, fake_scarb) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, log_path = fake_scarb()

    result = runner.invoke(
        app,
        ["--root", str(root), "--scarb", str(script), "--no-emoji", "--yes"],
        env={"SCARB_CLEAN_JOBS": None},
    )

    assert result.exit_code == 0, result.output
    assert "Run `scarb clean` in all listed directories?" not in result.output
    assert "up to 2 job(s)" in result.output
    assert "Done. All workspaces cleaned successfully." in result.output
    assert len(_read_calls(log_path)) == 2


@pytest.mark.parametrize("answer", ["n\n", "no\n", "maybe\n", ""])
def test_anything_but_yes_aborts(runner: CliRunner, make_tree, fake_scarb, answer: str) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, log_path = fake_scarb()

    result = runner.invoke(app, ["--root", str(root), "--scarb", str(script), "--no-emoji"], input=answer)

    assert result.exit_code == 0
    assert "Run `scarb clean` in all listed directories? [y/N]: " in result.output
    assert "Aborted." in result.output
    assert _read_calls(log_path) == []


def test_affirmative_answer_is_trimmed_and_case_insensitive(runner: CliRunner, make_tree, fake_scarb) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, log_path = fake_scarb()

    result = runner.invoke(app, ["--root", str(root), "--scarb", str(script), "--no-emoji"], input="  YES \n")

    assert result.exit_code == 0, result.output
    assert len(_read_calls(log_path)) == 2


def test_nothing_found_is_not_an_error(runner: CliRunner, make_tree) -> None:
    root = make_tree(["empty/src/lib.cairo"]) / "empty"

    result = runner.invoke(app, ["--root", str(root), "--no-emoji"])

    assert result.exit_code == 0
    assert f"No Scarb workspaces found under {root}." in result.output
    assert "[y/N]" not in result.output


def test_root_workspace_is_listed_as_dot(runner: CliRunner, make_tree) -> None:
    root = make_tree(["solo/Scarb.toml", "solo/nested/Scarb.toml"]) / "solo"

    result = runner.invoke(app, ["--root", str(root), "--no-emoji", "--dry-run"])

    assert result.exit_code == 0
    assert "Found 1 Scarb workspace(s):\n- .\n" in result.output


def test_dry_run_lists_commands_without_running(runner: CliRunner, make_tree, fake_scarb) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, log_path = fake_scarb()

    result = runner.invoke(app, ["--root", str(root), "--scarb", str(script), "--no-emoji", "--dry-run"])

    assert result.exit_code == 0
    assert "DRY RUN: would run" in result.output
    assert f"--manifest-path {root / 'A' / 'Scarb.toml'} clean" in result.output
    assert _read_calls(log_path) == []


def test_missing_executable_is_a_launch_failure(runner: CliRunner, make_tree, tmp_path: Path) -> None:
    root = make_tree(["repo/A/Scarb.toml"]) / "repo"
    missing = tmp_path / "no-such-dir" / "scarb"

    result = runner.invoke(app, ["--root", str(root), "--scarb", str(missing), "--no-emoji", "--yes"])

    assert result.exit_code == 1
    assert f"- {root / 'A'}: Failed to execute `scarb clean`:" in result.output
    assert "Done with 1 failure(s)." in result.output


def test_invalid_jobs_environment_is_ignored(runner: CliRunner, make_tree, fake_scarb) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, _log_path = fake_scarb()

    result = runner.invoke(
        app,
        ["--root", str(root), "--scarb", str(script), "--no-emoji", "--yes"],
        env={"SCARB_CLEAN_JOBS": "lots"},
    )

    assert result.exit_code == 0, result.output
    assert "Ignoring invalid SCARB_CLEAN_JOBS value: lots" in result.output
    assert "up to 2 job(s)" in result.output


def test_jobs_option_overrides_environment(runner: CliRunner, make_tree, fake_scarb) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, _log_path = fake_scarb()

    result = runner.invoke(
        app,
        ["--root", str(root), "--scarb", str(script), "--no-emoji", "--yes", "--jobs", "1"],
        env={"SCARB_CLEAN_JOBS": "8"},
    )

    assert result.exit_code == 0, result.output
    assert "up to 1 job(s)" in result.output


def test_jobs_option_must_be_positive(runner: CliRunner, make_tree) -> None:
    root = make_tree(SCENARIO) / "repo"

    result = runner.invoke(app, ["--root", str(root), "--jobs", "0"])

    assert result.exit_code == 2


def test_debug_flag_prints_settings(runner: CliRunner, make_tree) -> None:
    root = make_tree(SCENARIO) / "repo"

    result = runner.invoke(app, ["--root", str(root), "--no-emoji", "--dry-run", "--debug"])

    assert result.exit_code == 0
    assert "[debug]" in result.output
    assert f"root={root}" in result.output


def test_worker_pool_failure_exits_with_error(
    runner: CliRunner, make_tree, fake_scarb, monkeypatch: pytest.MonkeyPatch
) -> None:
    class _BrokenExecutor:
        def __init__(self, *args: object, **kwargs: object) -> None:
            raise ValueError("max_workers must be greater than 0")

    monkeypatch.setattr(runner_module, "ThreadPoolExecutor", _BrokenExecutor)
    root = make_tree(SCENARIO) / "repo"
    script, log_path = fake_scarb()

    result = runner.invoke(app, ["--root", str(root), "--scarb", str(script), "--no-emoji", "--yes"])

    assert result.exit_code == 1
    assert "Failed to create worker pool: max_workers must be greater than 0" in result.output
    assert "Done" not in result.output
    assert _read_calls(log_path) == []


def test_status_lines_carry_emoji_by_default(runner: CliRunner, make_tree, fake_scarb) -> None:
    root = make_tree(SCENARIO) / "repo"
    script, _log_path = fake_scarb(failing=["B"])

    result = runner.invoke(app, ["--root", str(root), "--scarb", str(script), "--yes"])

    assert result.exit_code == 1
    assert f"✅ - {root / 'A'}: Success." in result.output
    assert f"❌ - {root / 'B'}: Failed with exit code: 3" in result.output
    assert "❌ Done with 1 failure(s)." in result.output
