"""Tests for the ``init`` orchestrator."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import Mock, call, patch

import pytest

from doc_scaffold.core.init_tasks import (
    InitMkDocsOptions,
    InitOptions,
    InitTsConfigOptions,
    InitTypeDocOptions,
    init,
)
from doc_scaffold.core.python_deps import InitPythonOptions
from doc_scaffold.errors import DocScaffoldError

_MODULE = "doc_scaffold.core.init_tasks"


def test_typedoc_without_typescript_warns_and_skips_tsconfig(
    project_dir: Path, capsys: pytest.CaptureFixture[str],
) -> None:
    init(InitOptions(typedoc=True, typescript=False, cwd=project_dir))

    out = capsys.readouterr().out
    assert "TypeDoc requires a tsconfig.json" in out
    assert not (project_dir / "tsconfig.json").exists()
    assert (project_dir / "typedoc.json").is_file()


def test_no_warning_when_typescript_enabled(
    project_dir: Path, capsys: pytest.CaptureFixture[str],
) -> None:
    init(InitOptions(typedoc=True, typescript=True, cwd=project_dir))

    assert "TypeDoc requires" not in capsys.readouterr().out
    assert (project_dir / "tsconfig.json").is_file()


def test_no_flags_does_nothing(project_dir: Path) -> None:
    init(InitOptions(cwd=project_dir))

    assert list(project_dir.iterdir()) == []


def test_full_dry_run_writes_nothing_and_spawns_nothing(project_dir: Path) -> None:
    with patch("doc_scaffold.core.python_deps.subprocess.run") as mock_run:
        init(InitOptions(
            typescript=True,
            typedoc=True,
            python=True,
            mkdocs=True,
            dry_run=True,
            cwd=project_dir,
        ))

    mock_run.assert_not_called()
    assert list(project_dir.iterdir()) == []


@patch(f"{_MODULE}.init_mkdocs")
@patch(f"{_MODULE}.init_python")
@patch(f"{_MODULE}.init_typedoc_json")
@patch(f"{_MODULE}.init_tsconfig_json")
def test_steps_run_in_order_with_forwarded_options(
    mock_tsconfig: Mock,
    mock_typedoc: Mock,
    mock_python: Mock,
    mock_mkdocs: Mock,
) -> None:
    calls = Mock()
    calls.attach_mock(mock_tsconfig, "tsconfig")
    calls.attach_mock(mock_typedoc, "typedoc")
    calls.attach_mock(mock_python, "python")
    calls.attach_mock(mock_mkdocs, "mkdocs")
    cwd = Path("/work")

    init(InitOptions(
        typescript=True,
        typedoc=True,
        python=True,
        mkdocs=True,
        ts_config_json=Path("ts/tsconfig.json"),
        typedoc_json=Path("typedoc.custom.json"),
        mkdocs_path=Path("docs/mkdocs.yml"),
        package_json=Path("pkg/package.json"),
        overwrite=True,
        cwd=cwd,
        include=["src"],
        python_path="python3",
        site_name="Site",
        repo_url="https://github.com/o/r",
        repo_name="o/r",
        site_description="Desc",
        copyright="(c) me",
    ))

    assert calls.mock_calls == [
        call.tsconfig(InitTsConfigOptions(
            dest=Path("ts/tsconfig.json"),
            package_json=Path("pkg/package.json"),
            overwrite=True,
            dry_run=False,
            cwd=cwd,
            include=["src"],
        )),
        call.typedoc(InitTypeDocOptions(
            dest=Path("typedoc.custom.json"),
            package_json=Path("pkg/package.json"),
            overwrite=True,
            dry_run=False,
            cwd=cwd,
        )),
        call.python(InitPythonOptions(python_path="python3", dry_run=False)),
        call.mkdocs(InitMkDocsOptions(
            dest=Path("docs/mkdocs.yml"),
            package_json=Path("pkg/package.json"),
            overwrite=True,
            dry_run=False,
            cwd=cwd,
            site_name="Site",
            repo_url="https://github.com/o/r",
            repo_name="o/r",
            site_description="Desc",
            copyright="(c) me",
        )),
    ]


@patch(f"{_MODULE}.init_mkdocs")
@patch(f"{_MODULE}.init_python", side_effect=DocScaffoldError("pip failed"))
def test_first_failure_aborts_remaining_steps(
    _mock_python: Mock, mock_mkdocs: Mock, project_dir: Path,
) -> None:
    with pytest.raises(DocScaffoldError, match="pip failed"):
        init(InitOptions(typescript=True, python=True, mkdocs=True, cwd=project_dir))

    assert (project_dir / "tsconfig.json").is_file()
    mock_mkdocs.assert_not_called()


def test_malformed_tsconfig_stops_before_typedoc(project_dir: Path) -> None:
    (project_dir / "tsconfig.json").write_text("{broken")

    with pytest.raises(DocScaffoldError, match="tsconfig.json"):
        init(InitOptions(typescript=True, typedoc=True, cwd=project_dir))

    assert not (project_dir / "typedoc.json").exists()


def test_end_to_end_with_package_json(
    project_dir: Path, capsys: pytest.CaptureFixture[str],
) -> None:
    (project_dir / "package.json").write_text(json.dumps({
        "name": "@owner/thing",
        "description": "Things",
        "repository": "https://github.com/owner/thing.git",
    }))

    init(InitOptions(typescript=True, typedoc=True, mkdocs=True, cwd=project_dir))

    mkdocs_text = (project_dir / "mkdocs.yml").read_text()
    assert "site_name: '@owner/thing'" in mkdocs_text or 'site_name: "@owner/thing"' in mkdocs_text
    assert "repo_name: owner/thing" in mkdocs_text
    assert "Wrote MkDocs configuration" in capsys.readouterr().out
