"""Idempotent, non-destructive scaffold writer.

Existing paths are never overwritten, so running the same command twice
keeps every edit made in between.
"""

import logging
from enum import Enum
from pathlib import Path

from sprout.core.console import Console
from sprout.core.errors import FilesystemError
from sprout.core.templates import Scaffold

logger = logging.getLogger(__name__)


class WriteResult(Enum):
    CREATED = "created"
    EXISTS = "exists"


class ScaffoldWriter:
    """Materializes Scaffolds under a project root, one announced line per file."""

    def __init__(self, console: Console, *, dry_run: bool = False) -> None:
        self._console = console
        self._dry_run = dry_run

    def ensure_directory(self, path: Path) -> None:
        """Create `path` and any missing parents.

        Raises:
            FilesystemError: If the directory cannot be created
        """
        if self._dry_run:
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(path, "create directory", e) from e

    def write_if_missing(self, path: Path, content: str) -> WriteResult:
        """Write `content` to `path` unless something is already there.

        Parent directories are created first. The file is opened in exclusive
        mode, so a path that appears between the check and the write is left
        alone too.

        Raises:
            FilesystemError: On any I/O failure other than the path existing
        """
        if self._dry_run:
            if path.exists():
                self._console.info(f"  = (exists) {path}")
                return WriteResult.EXISTS
            self._console.info(f"  Would create {path}")
            return WriteResult.CREATED

        self.ensure_directory(path.parent)
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            self._console.info(f"  = (exists) {path}")
            return WriteResult.EXISTS
        except OSError as e:
            raise FilesystemError(path, "write", e) from e

        logger.debug("Wrote %d characters to %s", len(content), path)
        self._console.info(f"  + {path}")
        return WriteResult.CREATED

    def apply(self, root: Path, scaffold: Scaffold) -> list[Path]:
        """Create the scaffold's directories and files under `root`.

        Returns:
            Paths of the files that were newly created
        """
        self.ensure_directory(root)
        for directory in scaffold.directories:
            self.ensure_directory(root / directory)

        created: list[Path] = []
        for artifact in scaffold.files:
            path = root / artifact.path
            if self.write_if_missing(path, artifact.content) is WriteResult.CREATED:
                created.append(path)
        return created
