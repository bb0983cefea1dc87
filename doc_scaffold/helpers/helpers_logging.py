"""Simple logging helpers for the doc-scaffold CLI."""

import os

_DEBUG_ENV_VAR = "DOC_SCAFFOLD_DEBUG"

_debug_enabled = os.environ.get(_DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    MAGENTA = '\033[95m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def set_debug(enabled: bool) -> None:
    """Enable or disable ``print_debug`` output."""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug_enabled() -> bool:
    """Return True when debug output is shown."""
    return _debug_enabled


def _prefix(tag: str | None) -> str:
    return f"[{tag}] " if tag else ""


def print_header(msg: str) -> None:
    """Print a header message."""
    print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.ENDC}")


def print_info(msg: str, tag: str | None = None) -> None:
    """Print an info message."""
    print(f"{Colors.OKCYAN}{_prefix(tag)}{msg}{Colors.ENDC}")


def print_success(msg: str, tag: str | None = None) -> None:
    """Print a success message."""
    print(f"{Colors.OKGREEN}✓ {_prefix(tag)}{msg}{Colors.ENDC}")


def print_warning(msg: str, tag: str | None = None) -> None:
    """Print a warning message."""
    print(f"{Colors.WARNING}⚠️  {_prefix(tag)}{msg}{Colors.ENDC}")


def print_error(msg: str, tag: str | None = None) -> None:
    """Print an error message."""
    print(f"{Colors.FAIL}❌ {_prefix(tag)}{msg}{Colors.ENDC}")


def print_debug(msg: str, tag: str | None = None) -> None:
    """Print a debug message (only when debug output is enabled)."""
    if _debug_enabled:
        print(f"{Colors.DIM}{_prefix(tag)}{msg}{Colors.ENDC}")


def print_dry_run(msg: str) -> None:
    """Print what would happen without doing it."""
    print(f"{Colors.MAGENTA}{_prefix('dry-run')}{msg}{Colors.ENDC}")
