"""
YAML text codec for scaffolded files.
Provides validated ruamel.yaml instance with proper type hints.
"""

from io import StringIO
from typing import Protocol, TextIO, cast

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq


class YAMLLoader(Protocol):
    """Protocol for YAML loader with comment preservation."""
    preserve_quotes: bool
    default_flow_style: bool

    def load(self, stream: TextIO | str) -> object:
        """Load YAML from stream."""
        ...

    def dump(self, data: object, stream: TextIO) -> None:
        """Dump YAML to stream."""
        ...


def _validate_yaml_loader(obj: object) -> None:
    """Runtime validation: Ensure YAML object has expected interface.

    Raises:
        AttributeError: If required attributes/methods are missing
        TypeError: If methods are not callable
    """
    required_attrs = ['load', 'dump', 'preserve_quotes', 'default_flow_style']
    for attr in required_attrs:
        if not hasattr(obj, attr):
            raise AttributeError(f"YAML object missing required attribute: {attr}")

    if not callable(obj.load):  # type: ignore[attr-defined]
        raise TypeError("YAML.load is not callable")

    if not callable(obj.dump):  # type: ignore[attr-defined]
        raise TypeError("YAML.dump is not callable")


def _create_yaml_loader() -> YAMLLoader:
    """Create and validate YAML loader instance.

    Round-trip mode keeps comments, key order and custom tags
    (e.g. ``!!python/name:`` in mkdocs.yml) of existing files.

    Returns:
        Validated YAML loader with comment preservation
    """
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    yaml_obj.indent(mapping=2, sequence=4, offset=2)

    _validate_yaml_loader(yaml_obj)

    return cast(YAMLLoader, yaml_obj)


yaml: YAMLLoader = _create_yaml_loader()


def _to_commented(value: object) -> object:
    """Convert plain dicts/lists to ruamel containers so key order is kept."""
    if isinstance(value, CommentedMap | CommentedSeq):
        return value
    if isinstance(value, dict):
        return CommentedMap((key, _to_commented(item)) for key, item in value.items())
    if isinstance(value, list):
        return CommentedSeq(_to_commented(item) for item in value)
    return value


def parse_yaml(text: str) -> object:
    """Parse YAML text.

    ruamel.yaml's round-trip load() does not execute arbitrary Python
    code from YAML content.
    """
    return yaml.load(text)


def stringify_yaml(data: object) -> str:
    """Serialize data to YAML text."""
    stream = StringIO()
    yaml.dump(_to_commented(data), stream)
    return stream.getvalue()
