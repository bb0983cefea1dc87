"""Helper utilities for scaffolding: logging, codecs and project metadata."""
