"""
doc-scaffold

Scaffold and merge documentation tooling configuration
(tsconfig.json, typedoc.json, mkdocs.yml) and install the
Python packages MkDocs needs.
"""

__version__ = "0.1.0"

from doc_scaffold.core.init_tasks import InitOptions, init
from doc_scaffold.errors import DocScaffoldError

__all__ = [
    "DocScaffoldError",
    "InitOptions",
    "init",
]
