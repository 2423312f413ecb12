"""Exceptions shared across rnt-next.

Collaborator-specific errors (shell, template catalog, settings) live
next to the code that raises them but all derive from RntNextError.
"""

from typing import Optional


class RntNextError(Exception):
    """Base exception for rnt-next."""
    pass


class ValidationError(RntNextError):
    """Raw answers could not be turned into a ProjectConfig."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


# =============================================================================
# Generation pipeline
# =============================================================================

class GenerationError(RntNextError):
    """A pipeline stage failed. The run is aborted, nothing is rolled back."""

    stage = "generation"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class TargetExistsError(GenerationError):
    """The target directory is already on disk."""

    stage = "pre-flight"


class GenerationLockedError(GenerationError):
    """Another run holds the lock for the same target."""

    stage = "pre-flight"


class ScaffoldFailure(GenerationError):
    """create-next-app failed or produced no project."""

    stage = "scaffold"


class InstallFailure(GenerationError):
    """A dependency install command exited non-zero."""

    stage = "install"

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


class WriteFailure(GenerationError):
    """The filesystem rejected a directory or file write."""

    stage = "write"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
