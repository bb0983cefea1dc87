"""Create-or-merge tasks for scaffolded configuration files.

A scaffold task owns one file type (e.g. ``tsconfig.json``). When called it:

- resolves the destination path (``dest`` or ``cwd / file_name``)
- starts from the existing file content, or from a copy of the base
  template when the file is missing or ``overwrite`` is set
- applies the file-specific transform hook
- writes the result, skips it when nothing changed, or only reports it
  in dry-run mode

Merging is shallow: transforms set top-level keys, nested mappings are
never merged key by key.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar, cast

from doc_scaffold.core.templates import thaw
from doc_scaffold.errors import DocScaffoldError
from doc_scaffold.helpers.helpers_logging import (
    print_debug,
    print_dry_run,
    print_info,
    print_success,
)
from doc_scaffold.helpers.json_io import parse_json, stringify_json
from doc_scaffold.helpers.project_metadata import ProjectMetadata, load_project_metadata

Content = dict[str, object]


@dataclass
class ScaffoldTaskOptions:
    """Options recognized by every scaffold task."""

    dest: Path | None = None
    package_json: Path | None = None
    overwrite: bool = False
    dry_run: bool = False
    cwd: Path | None = None


OptionsT = TypeVar("OptionsT", bound=ScaffoldTaskOptions)

Deserializer = Callable[[str], object]
Serializer = Callable[[object], str]
Transformer = Callable[[Content, OptionsT, ProjectMetadata], Content]


def _identity_transform(
    content: Content, _opts: ScaffoldTaskOptions, _pkg: ProjectMetadata,
) -> Content:
    return content


@dataclass(frozen=True)
class ScaffoldHooks(Generic[OptionsT]):
    """Per-file-type hooks; defaults handle plain JSON with no field injection."""

    deserialize: Deserializer = parse_json
    serialize: Serializer = stringify_json
    transform: Transformer[OptionsT] = field(
        default=cast(Transformer[OptionsT], _identity_transform),
    )
    # Only tasks whose transform reads package.json fields load it
    uses_metadata: bool = False


class ScaffoldTask(Generic[OptionsT]):
    """Callable that scaffolds a single configuration file."""

    def __init__(
        self,
        file_name: str,
        base_template: Mapping[str, object],
        label: str,
        hooks: ScaffoldHooks[OptionsT] | None = None,
    ) -> None:
        self.file_name = file_name
        self.base_template = base_template
        self.label = label
        self.hooks: ScaffoldHooks[OptionsT] = hooks or ScaffoldHooks()

    def __repr__(self) -> str:
        return f"ScaffoldTask({self.file_name!r}, label={self.label!r})"

    def resolve_dest(self, opts: ScaffoldTaskOptions) -> Path:
        """Return the destination path for the given options."""
        cwd = opts.cwd or Path.cwd()
        if opts.dest is None:
            return cwd / self.file_name
        return opts.dest if opts.dest.is_absolute() else cwd / opts.dest

    def base_content(self) -> Content:
        """Return a fresh deep copy of the base template."""
        return cast(Content, thaw(self.base_template))

    def _read_existing(self, dest: Path) -> tuple[str, Content]:
        try:
            text = dest.read_text(encoding="utf-8")
        except OSError as e:
            raise DocScaffoldError(f"Could not read {dest}: {e}") from e

        try:
            parsed = self.hooks.deserialize(text)
        except Exception as e:
            raise DocScaffoldError(f"Could not parse {dest}: {e}") from e

        if parsed is None:
            return text, {}
        if not isinstance(parsed, dict):
            raise DocScaffoldError(
                f"Could not parse {dest}: expected a mapping at the top level, "
                + f"got {type(parsed).__name__}"
            )
        return text, cast(Content, parsed)

    def __call__(self, opts: OptionsT) -> None:
        dest = self.resolve_dest(opts)
        cwd = opts.cwd or Path.cwd()
        pkg = (
            load_project_metadata(opts.package_json, cwd)
            if self.hooks.uses_metadata
            else ProjectMetadata()
        )

        existing_text: str | None = None
        if dest.exists():
            if opts.overwrite:
                print_debug(f"Overwriting {dest} with base {self.label}")
                content = self.base_content()
            else:
                print_debug(f"Merging {self.label} into existing {dest}")
                existing_text, content = self._read_existing(dest)
        else:
            content = self.base_content()

        content = self.hooks.transform(content, opts, pkg)
        output = self.hooks.serialize(content)

        if opts.dry_run:
            print_dry_run(f"Would write {self.label} to {dest}:\n{output}")
            return

        if existing_text is not None and existing_text == output:
            print_info(f"⊘ {dest} already up to date")
            return

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(output, encoding="utf-8")
        except OSError as e:
            raise DocScaffoldError(f"Could not write {dest}: {e}") from e

        print_success(f"Wrote {self.label} to {dest}")


def create_scaffold_task(
    file_name: str,
    base_template: Mapping[str, object],
    label: str,
    hooks: ScaffoldHooks[OptionsT] | None = None,
) -> ScaffoldTask[OptionsT]:
    """Create a task that scaffolds ``file_name`` from ``base_template``.

    Args:
        file_name: Default file name, relative to the working directory
        base_template: Read-only default content; never mutated
        label: Human-readable name used in log messages
        hooks: Optional deserialize/serialize/transform overrides

    Returns:
        Callable task accepting scaffold options
    """
    return ScaffoldTask(file_name, base_template, label, hooks)
