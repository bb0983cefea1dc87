"""Exceptions raised by doc-scaffold."""


class DocScaffoldError(Exception):
    """Raised when a scaffold or install step cannot be completed."""
