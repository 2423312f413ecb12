"""Filesystem writes for a generated project."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class FileSystemWriter:
    """Creates directories and files below a project root.

    Paths are project-relative. Existing files are overwritten; existing
    directories are left alone.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def resolve(self, relative_path: Union[str, Path]) -> Path:
        return self.root / relative_path

    def ensure_directory(self, relative_path: Union[str, Path]) -> Path:
        path = self.resolve(relative_path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def write_file(self, relative_path: Union[str, Path], content: str) -> Path:
        path = self.resolve(relative_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes)", path, len(content))
        return path
