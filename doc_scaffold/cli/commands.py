#!/usr/bin/env python3
"""doc-scaffold CLI - Main Entry Point.

Usage:
    doc-scaffold init [options]

Examples:
    doc-scaffold init
    doc-scaffold init --no-python --site-name "My Project"
    doc-scaffold init --dry-run --repo-url https://github.com/owner/repo
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from doc_scaffold import __version__
from doc_scaffold.core.init_tasks import InitOptions, init
from doc_scaffold.core.python_deps import NAME_PYTHON
from doc_scaffold.errors import DocScaffoldError
from doc_scaffold.helpers.helpers_logging import print_error, print_header, set_debug

_PATH = click.Path(path_type=Path)


@click.group(name="doc-scaffold", help="Scaffold documentation tooling configuration")
@click.version_option(__version__, prog_name="doc-scaffold")
def _click_cli() -> None:
    """Root command group."""


@_click_cli.command(
    name="init",
    help="Create or update tsconfig.json, typedoc.json and mkdocs.yml, "
    + "and install Python dependencies",
)
# -- Steps --
@click.option("--typescript/--no-typescript", default=True, show_default=True,
              help="Create or update tsconfig.json")
@click.option("--typedoc/--no-typedoc", default=True, show_default=True,
              help="Create or update typedoc.json")
@click.option("--python/--no-python", default=True, show_default=True,
              help="Install Python dependencies")
@click.option("--mkdocs/--no-mkdocs", default=True, show_default=True,
              help="Create or update mkdocs.yml")
# -- Paths --
@click.option("--tsconfig-json", "ts_config_json", type=_PATH,
              help="Path to new or existing tsconfig.json")
@click.option("--typedoc-json", type=_PATH,
              help="Path to new or existing typedoc.json")
@click.option("--mkdocs-yml", "mkdocs_path", type=_PATH,
              help="Path to new or existing mkdocs.yml")
@click.option("--package-json", type=_PATH,
              help="Path to existing package.json (default: nearest ancestor)")
@click.option("--cwd", type=click.Path(path_type=Path, file_okay=False),
              help="Working directory (default: current directory)")
# -- TypeScript --
@click.option("--include", multiple=True,
              help="Source files (globs supported) for tsconfig.json; repeatable")
# -- Python --
@click.option("--python-path", default=NAME_PYTHON, show_default=True,
              help="Python 3 executable used to run pip")
# -- MkDocs --
@click.option("--site-name", help="mkdocs.yml site_name")
@click.option("--repo-url", help="mkdocs.yml repo_url")
@click.option("--repo-name", help="mkdocs.yml repo_name (owner/repo)")
@click.option("--site-description", help="mkdocs.yml site_description")
@click.option("--copyright", help="mkdocs.yml copyright")
# -- Behaviour --
@click.option("--overwrite", is_flag=True,
              help="Replace existing files instead of merging into them")
@click.option("--dry-run", is_flag=True,
              help="Show what would be written or executed without doing it")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def init_cmd(verbose: bool, include: tuple[str, ...], **kwargs: object) -> int:
    """Init command."""
    if verbose:
        set_debug(True)

    opts = InitOptions(include=list(include), **kwargs)  # type: ignore[arg-type]
    print_header("doc-scaffold init")
    init(opts)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:] if argv is None else argv,
            prog_name="doc-scaffold",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except DocScaffoldError as exc:
        print_error(str(exc))
        return 1

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
