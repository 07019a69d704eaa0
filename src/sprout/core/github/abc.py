"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod

from sprout.core.github.types import RepoCreationOutcome


class GitHub(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def create_repo(self, owner: str, repo_name: str, token: str | None) -> RepoCreationOutcome:
        """Create a public, empty repository for the authenticated user.

        Never raises for API or transport failures; those come back as
        RepoCreationFailed so local setup can carry on.

        Args:
            owner: Account the repository should belong to (used for reporting)
            repo_name: Repository name
            token: Access token; None or blank means no request is made

        Returns:
            RepoCreated for any 2xx, RepoAlreadyExists for 422,
            RepoCreationSkipped without a token, RepoCreationFailed otherwise
        """
        ...
