"""No-op Git wrapper for dry-run mode.

Queries are delegated to the wrapped implementation; mutating operations
print what would run and return without touching the repository. A root
that does not exist yet (dry-run never creates it) has no repository and
no remote, so queries about it are answered without delegating.
"""

from pathlib import Path

from sprout.cli.constants import ORIGIN
from sprout.core.console import Console
from sprout.core.git.abc import CommitResult, Git


class DryRunGit(Git):
    """Wrapper that prints mutating git operations instead of running them.

    Usage:
        real_ops = RealGit(executor, console)
        dry_run_ops = DryRunGit(real_ops, console)

        # Prints "Would run: git push -u origin main"
        dry_run_ops.push_current_branch(root, "main")
    """

    def __init__(self, wrapped: Git, console: Console) -> None:
        self._wrapped = wrapped
        self._console = console

    def _would_run(self, command: str) -> None:
        self._console.info(f"  Would run: {command}")

    # Read-only operations: delegate to wrapped implementation

    def has_git_dir(self, root: Path) -> bool:
        if not root.is_dir():
            return False
        return self._wrapped.has_git_dir(root)

    def has_origin(self, root: Path) -> bool:
        if not root.is_dir():
            return False
        return self._wrapped.has_origin(root)

    # Mutating operations: print intent only

    def ensure_initialized(self, root: Path, message: str) -> CommitResult:
        if not self.has_git_dir(root):
            self._would_run("git init")
        return self.commit_all(root, message)

    def commit_all(self, root: Path, message: str) -> CommitResult:
        self._would_run("git add .")
        self._would_run(f'git commit -m "{message}"')
        return CommitResult.COMMITTED

    def set_origin(self, root: Path, url: str, branch: str) -> None:
        if self.has_origin(root):
            self.remove_origin(root)
        self._would_run(f"git remote add {ORIGIN} {url}")
        self._would_run(f"git branch -M {branch}")

    def remove_origin(self, root: Path) -> None:
        self._would_run(f"git remote remove {ORIGIN}")

    def push_current_branch(self, root: Path, branch: str) -> None:
        self._would_run(f"git push -u {ORIGIN} {branch}")
