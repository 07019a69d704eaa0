"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
provisioning workflow testable without a git binary.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation driving git through a CommandExecutor
- DryRunGit: Wrapper that delegates queries and prints mutations
- FakeGit: In-memory implementation for command tests
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path


class CommitResult(Enum):
    """What a commit step ended up doing."""

    COMMITTED = "committed"
    NOTHING_TO_COMMIT = "nothing_to_commit"


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    Repository state (control directory, origin remote) is queried fresh on
    every call; implementations never cache it.
    """

    @abstractmethod
    def has_git_dir(self, root: Path) -> bool:
        """Check whether `root` already contains a `.git` control directory."""
        ...

    @abstractmethod
    def ensure_initialized(self, root: Path, message: str) -> CommitResult:
        """Initialize a repository if needed, then stage everything and commit.

        `git init` runs only when there is no control directory. Staging and
        committing run on every call.

        Args:
            root: Project root
            message: Commit message

        Returns:
            Whether a commit was created

        Raises:
            ExternalProcessError: If init, add or commit fails
        """
        ...

    @abstractmethod
    def commit_all(self, root: Path, message: str) -> CommitResult:
        """Stage every change under `root` and commit it.

        When nothing is staged and the branch already has a commit, the
        commit is skipped and NOTHING_TO_COMMIT is returned. A branch with no
        commit yet (unborn HEAD) always gets one, empty if need be.

        Raises:
            ExternalProcessError: If staging or committing fails
        """
        ...

    @abstractmethod
    def has_origin(self, root: Path) -> bool:
        """Check whether a remote named `origin` is configured."""
        ...

    @abstractmethod
    def set_origin(self, root: Path, url: str, branch: str) -> None:
        """Point `origin` at `url` and rename the current branch to `branch`.

        An existing origin is removed first (best effort), then re-added.

        Raises:
            ExternalProcessError: If adding the remote or renaming fails
        """
        ...

    @abstractmethod
    def remove_origin(self, root: Path) -> None:
        """Remove the `origin` remote. Failures are ignored."""
        ...

    @abstractmethod
    def push_current_branch(self, root: Path, branch: str) -> None:
        """Push `branch` to origin and set it as upstream.

        Raises:
            ExternalProcessError: If the push fails
        """
        ...
