"""No-op GitHub wrapper for dry-run mode."""

from sprout.core.console import Console
from sprout.core.github.abc import GitHub
from sprout.core.github.types import (
    DRY_RUN_REASON,
    NO_TOKEN_REASON,
    RepoCreationOutcome,
    RepoCreationSkipped,
)


class DryRunGitHub(GitHub):
    """Prints the repository it would create and sends nothing.

    A request with a token is skipped with DRY_RUN_REASON, which lets the
    workflow go on to print its link and push steps. Without a token the
    outcome matches the real client's.
    """

    def __init__(self, wrapped: GitHub, console: Console) -> None:
        self._wrapped = wrapped
        self._console = console

    def create_repo(self, owner: str, repo_name: str, token: str | None) -> RepoCreationOutcome:
        if token is None or not token.strip():
            return RepoCreationSkipped(reason=NO_TOKEN_REASON)

        self._console.info(f"  Would create GitHub repo: {owner}/{repo_name}")
        return RepoCreationSkipped(reason=DRY_RUN_REASON)
