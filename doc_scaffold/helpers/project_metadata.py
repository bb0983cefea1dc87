"""Read project metadata (name, description, repository) from package.json."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from doc_scaffold.errors import DocScaffoldError
from doc_scaffold.helpers.helpers_logging import print_debug

PACKAGE_JSON = "package.json"


@dataclass(frozen=True)
class ProjectMetadata:
    """Descriptive fields of the host project.

    All fields are optional; an empty instance stands for "no metadata".
    """

    name: str | None = None
    description: str | None = None
    repository_url: str | None = None


def find_package_json(start: Path) -> Path | None:
    """Find the nearest package.json by walking up from ``start``."""
    current = start.resolve()
    while True:
        candidate = current / PACKAGE_JSON
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def _repository_url(repository: object) -> str | None:
    """Extract the URL from a ``repository`` field (string or object)."""
    if isinstance(repository, str):
        return repository or None
    if isinstance(repository, dict):
        url = cast(dict[str, object], repository).get("url")
        if isinstance(url, str) and url:
            return url
    return None


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def read_package_json(path: Path) -> ProjectMetadata:
    """Read and parse a package.json file.

    Raises:
        DocScaffoldError: If the file cannot be read or is not a JSON object
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DocScaffoldError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DocScaffoldError(f"Could not parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise DocScaffoldError(f"Could not parse {path}: expected a JSON object")

    data = cast(dict[str, object], raw)
    return ProjectMetadata(
        name=_optional_str(data.get("name")),
        description=_optional_str(data.get("description")),
        repository_url=_repository_url(data.get("repository")),
    )


def load_project_metadata(package_json: Path | None, cwd: Path) -> ProjectMetadata:
    """Load metadata from an explicit package.json or the nearest one above ``cwd``.

    A missing package.json during discovery is not an error; an explicit
    path that cannot be read is.
    """
    if package_json is not None:
        path = package_json if package_json.is_absolute() else cwd / package_json
        return read_package_json(path)

    found = find_package_json(cwd)
    if found is None:
        print_debug(f"No {PACKAGE_JSON} found above {cwd}; continuing without metadata")
        return ProjectMetadata()

    print_debug(f"Using project metadata from {found}")
    return read_package_json(found)
