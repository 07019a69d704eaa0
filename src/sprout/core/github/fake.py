"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from sprout.core.github.abc import GitHub
from sprout.core.github.types import (
    NO_TOKEN_REASON,
    RepoCreated,
    RepoCreationOutcome,
    RepoCreationSkipped,
)


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via the
    constructor using keyword arguments with sensible defaults.
    """

    def __init__(self, *, outcome: RepoCreationOutcome | None = None) -> None:
        """Create FakeGitHub.

        Args:
            outcome: Outcome returned for every request that carries a token.
                     Defaults to RepoCreated for the requested repository.
        """
        self._outcome = outcome
        self._create_calls: list[tuple[str, str, str]] = []

    @property
    def create_calls(self) -> list[tuple[str, str, str]]:
        """Read-only access to (owner, repo_name, token) for each request sent."""
        return self._create_calls

    def create_repo(self, owner: str, repo_name: str, token: str | None) -> RepoCreationOutcome:
        # Mirrors RealGitHub: nothing is "sent" without a token
        if token is None or not token.strip():
            return RepoCreationSkipped(reason=NO_TOKEN_REASON)

        self._create_calls.append((owner, repo_name, token))
        if self._outcome is not None:
            return self._outcome
        return RepoCreated(owner=owner, repo_name=repo_name)
