"""
CLI module for doc-scaffold.

Provides the main entry point installed as the ``doc-scaffold`` console script.
"""

from .commands import main

__all__ = ["main"]
