"""Shared fixtures for the doc-scaffold test suite.

Every test gets an isolated project directory under ``tmp_path``; package.json
discovery is pinned to that directory so a stray package.json above the temp
dir cannot leak metadata into assertions.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from doc_scaffold.helpers import helpers_logging
from doc_scaffold.helpers import project_metadata

WritePackageJson = Callable[..., Path]


@pytest.fixture(autouse=True)
def _reset_debug() -> Iterator[None]:
    """Debug output is module state; restore it after each test."""
    previous = helpers_logging.is_debug_enabled()
    helpers_logging.set_debug(False)
    try:
        yield
    finally:
        helpers_logging.set_debug(previous)


@pytest.fixture()
def project_dir(tmp_path: Path) -> Iterator[Path]:
    """Create an empty project directory with package.json discovery confined to it."""
    root = tmp_path / "project"
    root.mkdir()
    real_find = project_metadata.find_package_json

    def _find(start: Path) -> Path | None:
        found = real_find(start)
        if found is None or root.resolve() not in found.resolve().parents:
            return None
        return found

    with patch.object(project_metadata, "find_package_json", side_effect=_find):
        yield root


@pytest.fixture()
def write_package_json(project_dir: Path) -> WritePackageJson:
    """Return a helper that writes ``package.json`` into the project."""

    def _write(**fields: object) -> Path:
        path = project_dir / "package.json"
        path.write_text(json.dumps(fields, indent=2))
        return path

    return _write
