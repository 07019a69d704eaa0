"""Production Git implementation.

Every git invocation goes through a CommandExecutor so the sequencing here
can be exercised with a recording executor instead of a git binary.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from sprout.cli.constants import ORIGIN
from sprout.core.console import Console
from sprout.core.errors import ExternalProcessError
from sprout.core.executor.abc import CommandExecutor
from sprout.core.git.abc import CommitResult, Git

logger = logging.getLogger(__name__)


class RealGit(Git):
    """Drives the git CLI. Mutating commands announce themselves before running."""

    def __init__(self, executor: CommandExecutor, console: Console) -> None:
        self._executor = executor
        self._console = console

    def _run(self, root: Path, cmd: Sequence[str], operation_context: str) -> None:
        self._console.info(f"  $ {' '.join(cmd)}")
        exit_code = self._executor.execute(root, cmd)
        if exit_code != 0:
            raise ExternalProcessError(cmd, operation_context, exit_code)

    def has_git_dir(self, root: Path) -> bool:
        return (root / ".git").exists()

    def ensure_initialized(self, root: Path, message: str) -> CommitResult:
        if self.has_git_dir(root):
            logger.debug("Repository already initialized at %s", root)
        else:
            self._run(root, ["git", "init"], "initialize git repository")
        return self.commit_all(root, message)

    def commit_all(self, root: Path, message: str) -> CommitResult:
        self._run(root, ["git", "add", "."], "stage files")

        if not self._has_staged_changes(root):
            if self._has_head(root):
                logger.debug("Nothing staged in %s, skipping commit", root)
                return CommitResult.NOTHING_TO_COMMIT
            # An unborn branch cannot be pushed until it has a commit
            self._run(
                root,
                ["git", "commit", "--allow-empty", "-m", message],
                "create initial commit",
            )
            return CommitResult.COMMITTED

        self._run(root, ["git", "commit", "-m", message], "commit changes")
        return CommitResult.COMMITTED

    def _has_staged_changes(self, root: Path) -> bool:
        cmd = ["git", "diff", "--cached", "--quiet"]
        exit_code = self._executor.execute(root, cmd, quiet=True)
        if exit_code not in (0, 1):
            raise ExternalProcessError(cmd, "inspect staged changes", exit_code)
        return exit_code == 1

    def _has_head(self, root: Path) -> bool:
        cmd = ["git", "rev-parse", "--verify", "--quiet", "HEAD"]
        return self._executor.execute(root, cmd, quiet=True) == 0

    def has_origin(self, root: Path) -> bool:
        exit_code = self._executor.execute(root, ["git", "remote", "get-url", ORIGIN], quiet=True)
        return exit_code == 0

    def set_origin(self, root: Path, url: str, branch: str) -> None:
        if self.has_origin(root):
            self.remove_origin(root)
        else:
            self._console.info(f"🔍 No existing '{ORIGIN}' remote found, skipping removal.")

        self._run(root, ["git", "remote", "add", ORIGIN, url], f"add remote '{ORIGIN}'")
        self._run(root, ["git", "branch", "-M", branch], f"rename branch to '{branch}'")

    def remove_origin(self, root: Path) -> None:
        try:
            self._run(root, ["git", "remote", "remove", ORIGIN], f"remove remote '{ORIGIN}'")
        except ExternalProcessError as e:
            # A remote that cannot be removed is as good as one that is gone
            logger.debug("Ignoring failed remote removal: %s", e)

    def push_current_branch(self, root: Path, branch: str) -> None:
        self._run(root, ["git", "push", "-u", ORIGIN, branch], f"push '{branch}' to {ORIGIN}")
