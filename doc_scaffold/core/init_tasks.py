"""Scaffold tasks for tsconfig.json, typedoc.json and mkdocs.yml, and the ``init`` handler."""

from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlparse

from doc_scaffold.core.python_deps import NAME_PYTHON, InitPythonOptions, init_python
from doc_scaffold.core.scaffold_task import (
    Content,
    ScaffoldHooks,
    ScaffoldTaskOptions,
    create_scaffold_task,
)
from doc_scaffold.core.templates import (
    BASE_MKDOCS_YML,
    BASE_TSCONFIG_JSON,
    BASE_TYPEDOC_JSON,
    NAME_MKDOCS_YML,
    NAME_TSCONFIG_JSON,
    NAME_TYPEDOC_JSON,
)
from doc_scaffold.helpers.helpers_logging import print_debug, print_info, print_warning
from doc_scaffold.helpers.project_metadata import ProjectMetadata
from doc_scaffold.helpers.yaml_loader import parse_yaml, stringify_yaml

_LOG_TAG = "init"


@dataclass
class InitTsConfigOptions(ScaffoldTaskOptions):
    """Options for ``init_tsconfig_json``."""

    # Source globs; typically ``src`` or ``lib``
    include: list[str] | None = None


@dataclass
class InitTypeDocOptions(ScaffoldTaskOptions):
    """Options for ``init_typedoc_json``."""


@dataclass
class InitMkDocsOptions(ScaffoldTaskOptions):
    """Options for ``init_mkdocs``."""

    site_name: str | None = None
    repo_url: str | None = None
    repo_name: str | None = None
    site_description: str | None = None
    copyright: str | None = None


@dataclass
class InitOptions:
    """Options for the ``init`` command handler.

    The per-file path options are passed to the scaffold tasks as ``dest``.
    """

    typescript: bool = False
    typedoc: bool = False
    python: bool = False
    mkdocs: bool = False
    ts_config_json: Path | None = None
    typedoc_json: Path | None = None
    mkdocs_path: Path | None = None
    package_json: Path | None = None
    overwrite: bool = False
    dry_run: bool = False
    cwd: Path | None = None
    include: list[str] = field(default_factory=list)
    python_path: str = NAME_PYTHON
    site_name: str | None = None
    repo_url: str | None = None
    repo_name: str | None = None
    site_description: str | None = None
    copyright: str | None = None


def _transform_tsconfig(
    content: Content, opts: InitTsConfigOptions, _pkg: ProjectMetadata,
) -> Content:
    if not opts.include:
        return content
    return {**content, "include": list(opts.include)}


def repo_name_from_url(repo_url: str) -> str:
    """Derive ``owner/repo`` from a repository URL.

    A URL with fewer than two path segments yields an empty owner or repo.
    """
    path = urlparse(repo_url).path
    if path.startswith("/"):
        path = path[1:]
    segments = path.split("/")
    owner = segments[0]
    repo = segments[1] if len(segments) > 1 else ""
    repo = repo.removesuffix(".git")
    return f"{owner}/{repo}"


def _pick(explicit: str | None, existing: object) -> str | None:
    """Explicit option first, then the value already in the file."""
    if explicit is not None:
        return explicit
    return existing if isinstance(existing, str) else None


def _transform_mkdocs(
    content: Content, opts: InitMkDocsOptions, pkg: ProjectMetadata,
) -> Content:
    site_name = _pick(opts.site_name, content.get("site_name"))
    if not site_name:
        site_name = pkg.name
        if site_name:
            print_info(f"Using site name from package.json: {site_name}", tag=_LOG_TAG)

    repo_url = _pick(opts.repo_url, content.get("repo_url"))
    repo_url_from_pkg = False
    if not repo_url:
        repo_url = pkg.repository_url
        if repo_url:
            repo_url_from_pkg = True
            print_info(f"Using repo URL from package.json: {repo_url}", tag=_LOG_TAG)

    repo_name = _pick(opts.repo_name, content.get("repo_name"))
    if repo_url and not repo_name:
        repo_name = repo_name_from_url(repo_url)
        if repo_url_from_pkg:
            print_info(f"Using repo name from package.json: {repo_name}", tag=_LOG_TAG)
        else:
            print_debug(f"Derived repo name from repo URL: {repo_name}", tag=_LOG_TAG)

    site_description = _pick(opts.site_description, content.get("site_description"))
    if not site_description:
        site_description = pkg.description
        if site_description:
            print_info(
                f"Using site description from package.json: {site_description}",
                tag=_LOG_TAG,
            )

    copyright_ = _pick(opts.copyright, content.get("copyright"))

    derived = {
        "site_name": site_name,
        "repo_url": repo_url,
        "repo_name": repo_name,
        "site_description": site_description,
        "copyright": copyright_,
    }
    # Set in place so ruamel keeps comments and key order of existing files;
    # ``content`` is always a fresh copy owned by the task.
    for key, value in derived.items():
        if value:
            content[key] = value
    return content


init_tsconfig_json = create_scaffold_task(
    NAME_TSCONFIG_JSON,
    BASE_TSCONFIG_JSON,
    "TypeScript configuration",
    ScaffoldHooks(transform=_transform_tsconfig),
)

init_typedoc_json = create_scaffold_task(
    NAME_TYPEDOC_JSON,
    BASE_TYPEDOC_JSON,
    "TypeDoc configuration",
)

init_mkdocs = create_scaffold_task(
    NAME_MKDOCS_YML,
    BASE_MKDOCS_YML,
    "MkDocs configuration",
    ScaffoldHooks(
        deserialize=parse_yaml,
        serialize=stringify_yaml,
        transform=_transform_mkdocs,
        uses_metadata=True,
    ),
)


def init(opts: InitOptions | None = None) -> None:
    """Main handler for the ``init`` command.

    Tasks run one after another so console output stays readable. The first
    failure propagates and the remaining tasks are not run.
    """
    opts = opts or InitOptions()

    if opts.typedoc and not opts.typescript:
        print_warning(
            "Initialization of tsconfig.json disabled. "
            + "TypeDoc requires a tsconfig.json; please ensure it exists",
            tag=_LOG_TAG,
        )

    if opts.typescript:
        init_tsconfig_json(InitTsConfigOptions(
            dest=opts.ts_config_json,
            package_json=opts.package_json,
            overwrite=opts.overwrite,
            dry_run=opts.dry_run,
            cwd=opts.cwd,
            include=opts.include or None,
        ))

    if opts.typedoc:
        init_typedoc_json(InitTypeDocOptions(
            dest=opts.typedoc_json,
            package_json=opts.package_json,
            overwrite=opts.overwrite,
            dry_run=opts.dry_run,
            cwd=opts.cwd,
        ))

    if opts.python:
        init_python(InitPythonOptions(
            python_path=opts.python_path,
            dry_run=opts.dry_run,
        ))

    if opts.mkdocs:
        init_mkdocs(InitMkDocsOptions(
            dest=opts.mkdocs_path,
            package_json=opts.package_json,
            overwrite=opts.overwrite,
            dry_run=opts.dry_run,
            cwd=opts.cwd,
            site_name=opts.site_name,
            repo_url=opts.repo_url,
            repo_name=opts.repo_name,
            site_description=opts.site_description,
            copyright=opts.copyright,
        ))
