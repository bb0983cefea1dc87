"""Install the Python packages the documentation build needs (MkDocs and plugins)."""

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

from doc_scaffold.errors import DocScaffoldError
from doc_scaffold.helpers.helpers_logging import (
    print_debug,
    print_dry_run,
    print_info,
    print_success,
)

NAME_PYTHON = "python"

# Shipped inside the package; not user-configurable.
REQUIREMENTS_TXT_PATH = Path(__file__).resolve().parents[1] / "requirements.txt"

_LOG_TAG = "init"


@dataclass
class InitPythonOptions:
    """Options for ``init_python``."""

    python_path: str = NAME_PYTHON
    dry_run: bool = False


def pip_install_args() -> list[str]:
    """Return the interpreter arguments that install the requirements file."""
    return ["-m", "pip", "install", "-r", str(REQUIREMENTS_TXT_PATH)]


def build_command(python_path: str) -> str:
    """Build the shell command line for the install.

    ``python_path`` is passed through unquoted so values such as
    ``py -3`` keep working under the shell.
    """
    return " ".join([python_path, *(shlex.quote(arg) for arg in pip_install_args())])


def init_python(opts: InitPythonOptions | None = None) -> None:
    """Install Python dependencies from the bundled requirements.txt.

    Raises:
        DocScaffoldError: If the interpreter cannot be started or pip fails
    """
    opts = opts or InitPythonOptions()
    command = build_command(opts.python_path)

    if opts.dry_run:
        print_dry_run(f"Would execute command: {command}")
        return

    print_debug(f"Executing command: {command}", tag=_LOG_TAG)
    print_info("Installing Python dependencies...", tag=_LOG_TAG)

    try:
        result = subprocess.run(
            command,
            shell=True,
            check=False,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise DocScaffoldError(
            f"Could not install Python dependencies. Reason: {e}"
        ) from e

    if result.returncode != 0:
        reason = result.stdout.strip() or result.stderr.strip()
        raise DocScaffoldError(
            f"Could not install Python dependencies. Reason: {reason}"
        )

    print_success(
        "Installed Python dependencies (or dependencies already installed)",
        tag=_LOG_TAG,
    )
