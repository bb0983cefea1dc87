"""Base content for each scaffolded configuration file.

These mappings are read-only; scaffold tasks deep-copy them before use.
"""

from collections.abc import Mapping
from types import MappingProxyType

NAME_TSCONFIG_JSON = "tsconfig.json"
NAME_TYPEDOC_JSON = "typedoc.json"
NAME_MKDOCS_YML = "mkdocs.yml"

BASE_TSCONFIG_JSON: Mapping[str, object] = MappingProxyType({
    "$schema": "https://json.schemastore.org/tsconfig",
    "extends": "@appium/tsconfig/tsconfig.json",
    "compilerOptions": MappingProxyType({
        "outDir": "build",
    }),
    "include": ("lib", "src", "test"),
})

BASE_TYPEDOC_JSON: Mapping[str, object] = MappingProxyType({
    "$schema": "https://typedoc.org/schema.json",
    "cleanOutputDir": True,
    "entryPointStrategy": "packages",
    "theme": "appium",
    "plugin": (
        "@appium/typedoc-plugin-appium",
        "typedoc-plugin-markdown",
        "typedoc-plugin-resolve-crossmodule-references",
    ),
    "readme": "none",
    "entryPoints": (".",),
})

BASE_MKDOCS_YML: Mapping[str, object] = MappingProxyType({
    "INHERIT": "./node_modules/@appium/docutils/base-mkdocs.yml",
})


def thaw(value: object) -> object:
    """Return a mutable deep copy of a frozen template value."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple | list):
        return [thaw(item) for item in value]
    return value
