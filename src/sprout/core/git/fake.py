"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from sprout.core.errors import ExternalProcessError
from sprout.core.git.abc import CommitResult, Git


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via the
    constructor; mutations performed by the code under test are recorded and
    exposed through read-only properties.
    """

    def __init__(
        self,
        *,
        initialized: set[Path] | None = None,
        origins: dict[Path, str] | None = None,
        push_fails: bool = False,
        commit_fails: bool = False,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            initialized: Roots that already contain a repository
            origins: Mapping of root -> configured origin URL
            push_fails: If True, push_current_branch raises ExternalProcessError
            commit_fails: If True, committing raises ExternalProcessError
        """
        self._initialized = set(initialized or ())
        self._origins = dict(origins or {})
        self._push_fails = push_fails
        self._commit_fails = commit_fails
        self._init_calls: list[Path] = []
        self._commits: list[tuple[Path, str]] = []
        self._removed_origins: list[Path] = []
        self._set_origin_calls: list[tuple[Path, str, str]] = []
        self._pushes: list[tuple[Path, str]] = []

    @property
    def init_calls(self) -> list[Path]:
        """Roots on which `git init` would have run."""
        return self._init_calls

    @property
    def commits(self) -> list[tuple[Path, str]]:
        """List of (root, message) commits that were made."""
        return self._commits

    @property
    def removed_origins(self) -> list[Path]:
        return self._removed_origins

    @property
    def set_origin_calls(self) -> list[tuple[Path, str, str]]:
        """List of (root, url, branch) tuples passed to set_origin()."""
        return self._set_origin_calls

    @property
    def pushes(self) -> list[tuple[Path, str]]:
        """List of (root, branch) tuples that were pushed."""
        return self._pushes

    def has_git_dir(self, root: Path) -> bool:
        return root in self._initialized

    def ensure_initialized(self, root: Path, message: str) -> CommitResult:
        if root not in self._initialized:
            self._init_calls.append(root)
            self._initialized.add(root)
        return self.commit_all(root, message)

    def commit_all(self, root: Path, message: str) -> CommitResult:
        if self._commit_fails:
            raise ExternalProcessError(["git", "commit", "-m", message], "commit changes", 1)
        self._commits.append((root, message))
        return CommitResult.COMMITTED

    def has_origin(self, root: Path) -> bool:
        return root in self._origins

    def set_origin(self, root: Path, url: str, branch: str) -> None:
        if root in self._origins:
            self.remove_origin(root)
        self._set_origin_calls.append((root, url, branch))
        self._origins[root] = url

    def remove_origin(self, root: Path) -> None:
        self._removed_origins.append(root)
        self._origins.pop(root, None)

    def push_current_branch(self, root: Path, branch: str) -> None:
        if self._push_fails:
            raise ExternalProcessError(["git", "push", "-u", "origin", branch], "push", 128)
        self._pushes.append((root, branch))
