"""JSON text codec for scaffolded files."""

import json

_JSON_INDENT = 2


def parse_json(text: str) -> object:
    """Parse JSON text."""
    return json.loads(text)


def stringify_json(data: object) -> str:
    """Serialize data as pretty JSON with a trailing newline."""
    return json.dumps(data, indent=_JSON_INDENT, ensure_ascii=False) + "\n"
