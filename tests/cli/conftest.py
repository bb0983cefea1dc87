"""Shared fixtures for CLI tests.

Every CLI test gets an isolated temporary directory to work in, so tests
never pollute each other or the real workspace. Commands run through
``doc_scaffold.cli.commands.main`` exactly as the console script does.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from doc_scaffold.cli.commands import main

# (exit code, captured stdout)
RunCli = Callable[..., tuple[int, str]]


@pytest.fixture()
def isolated_project(project_dir: Path) -> Iterator[Path]:
    """cd into an empty project directory for the duration of the test."""
    original_cwd = Path.cwd()
    os.chdir(project_dir)
    try:
        yield project_dir
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def mock_pip() -> Iterator[Mock]:
    """Mock the pip subprocess; it succeeds unless a test says otherwise."""
    with patch("doc_scaffold.core.python_deps.subprocess.run") as mock_run:
        mock_run.return_value.returncode = 0
        mock_run.return_value.stdout = ""
        mock_run.return_value.stderr = ""
        yield mock_run


@pytest.fixture()
def run_cli(
    isolated_project: Path,
    mock_pip: Mock,
    capsys: pytest.CaptureFixture[str],
) -> RunCli:
    """Return a helper that invokes ``doc-scaffold <args>`` and captures stdout."""

    def _run(*args: str) -> tuple[int, str]:
        code = main(list(args))
        return code, capsys.readouterr().out

    return _run
