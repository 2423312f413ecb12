"""External command execution for rnt-next.

create-next-app, npm and prisma are interactive tools whose output the
user should see, so commands inherit the terminal instead of being
captured.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from rnt_next.errors import RntNextError

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class ShellError(RntNextError):
    """Base exception for external commands."""
    pass


class ShellNotFoundError(ShellError):
    """The executable is not installed or not in PATH."""

    def __init__(self, message: str, executable: str):
        super().__init__(message)
        self.executable = executable


class ShellTimeoutError(ShellError):
    """Command timed out."""

    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout


class ShellCommandError(ShellError):
    """Command exited with a non-zero exit code."""

    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


# =============================================================================
# Core Functions
# =============================================================================

def format_command(command: Sequence[str]) -> str:
    """Render a command the way a user would type it."""
    return " ".join(shlex.quote(part) for part in command)


def run_command(
    command: Sequence[str],
    cwd: Path,
    timeout: Optional[float] = None,
) -> None:
    """Run a command in cwd and wait for it.

    Args:
        command: Executable and arguments (no shell interpretation)
        cwd: Working directory
        timeout: Seconds before giving up (None waits forever)

    Raises:
        ShellNotFoundError: If the executable is missing
        ShellTimeoutError: If the command times out
        ShellCommandError: If the command exits non-zero
    """
    cmd = list(command)
    cmd_str = format_command(cmd)
    logger.debug("Running %s in %s", cmd_str, cwd)

    try:
        result = subprocess.run(cmd, cwd=cwd, timeout=timeout)
    except FileNotFoundError as exc:
        raise ShellNotFoundError(
            f"{cmd[0]} is not installed or not in PATH. "
            "Please install Node.js: https://nodejs.org",
            executable=cmd[0],
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise ShellTimeoutError(
            f"Command timed out after {timeout}s: {cmd_str}",
            timeout=timeout,
        ) from exc

    if result.returncode != 0:
        raise ShellCommandError(
            f"Command failed with exit code {result.returncode}: {cmd_str}",
            returncode=result.returncode,
        )


class ShellRunner:
    """Runs commands for the generator with a shared timeout."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, command: Sequence[str], cwd: Path) -> None:
        run_command(command, cwd=cwd, timeout=self.timeout)
