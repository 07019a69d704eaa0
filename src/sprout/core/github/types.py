"""Outcomes of asking the forge to create a repository."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoCreated:
    """The forge created the repository."""

    owner: str
    repo_name: str


@dataclass(frozen=True)
class RepoAlreadyExists:
    """The forge answered 422: a repository with that name is already there."""

    owner: str
    repo_name: str


@dataclass(frozen=True)
class RepoCreationSkipped:
    """No request was sent (no token, or dry-run)."""

    reason: str


@dataclass(frozen=True)
class RepoCreationFailed:
    """The request failed.

    status is None when the forge could not be reached at all; body then
    holds the transport error message.
    """

    status: int | None
    body: str


RepoCreationOutcome = RepoCreated | RepoAlreadyExists | RepoCreationSkipped | RepoCreationFailed

NO_TOKEN_REASON = "no GitHub token"
DRY_RUN_REASON = "dry run"
