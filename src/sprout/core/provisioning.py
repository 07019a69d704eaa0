"""Local git + remote repository provisioning workflow.

The workflow is a small state machine:

    UNINITIALIZED -> LOCAL_READY
        -> REMOTE_SKIPPED | REMOTE_CREATED | REMOTE_EXISTS | REMOTE_CREATE_FAILED
        -> REMOTE_LINKED -> PUSHED

Remote provisioning happens at most once per run and never fails the run.
A failed push does: it raises ExternalProcessError to the dispatcher.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sprout.cli.constants import DEFAULT_BRANCH, INITIAL_COMMIT_MESSAGE
from sprout.core.config import SproutConfig
from sprout.core.context import SproutContext
from sprout.core.git.abc import CommitResult
from sprout.core.github.types import (
    NO_TOKEN_REASON,
    RepoAlreadyExists,
    RepoCreated,
    RepoCreationOutcome,
    RepoCreationSkipped,
)

logger = logging.getLogger(__name__)


class GitPrepState(Enum):
    UNINITIALIZED = "uninitialized"
    LOCAL_READY = "local_ready"
    REMOTE_SKIPPED = "remote_skipped"
    REMOTE_CREATED = "remote_created"
    REMOTE_EXISTS = "remote_exists"
    REMOTE_CREATE_FAILED = "remote_create_failed"
    REMOTE_LINKED = "remote_linked"
    PUSHED = "pushed"


@dataclass(frozen=True)
class GithubCredentials:
    """Who owns the remote repository, what it is called, and how to authenticate."""

    owner: str
    repo_name: str
    token: str | None


@dataclass(frozen=True)
class RemoteRequest:
    """A request to provision (and usually link) a GitHub repository.

    link_when_skipped: link origin and push even when provisioning was
    skipped for lack of a token, for repositories that already exist on the
    forge.
    """

    credentials: GithubCredentials
    link_when_skipped: bool = False


@dataclass(frozen=True)
class WorkflowResult:
    """States visited by one run of the workflow, in order."""

    states: tuple[GitPrepState, ...]
    outcome: RepoCreationOutcome | None = None

    @property
    def final_state(self) -> GitPrepState:
        return self.states[-1]


def resolve_token(flag_token: str | None, config: SproutConfig) -> str | None:
    """Pick the token: explicit flag, then environment, else None."""
    if flag_token is not None and flag_token.strip():
        return flag_token.strip()
    return config.github_token


def initialize_local(ctx: SproutContext, root: Path) -> GitPrepState:
    """Bring `root` to LOCAL_READY: init if needed, stage, commit."""
    ctx.console.info("🌿 Preparing local git repository...")
    result = ctx.git.ensure_initialized(root, INITIAL_COMMIT_MESSAGE)
    if result is CommitResult.NOTHING_TO_COMMIT:
        ctx.console.info("✔️ Git already initialized; nothing new to commit.")
    else:
        ctx.console.success("✔️ Git initialized and first commit made.")
    return GitPrepState.LOCAL_READY


def provision_remote(ctx: SproutContext, credentials: GithubCredentials) -> RepoCreationOutcome:
    """Ask the forge for the repository once and report what happened."""
    full_name = f"{credentials.owner}/{credentials.repo_name}"
    if credentials.token is not None:
        ctx.console.info(f"🚀 Creating GitHub repo {full_name}...")

    outcome = ctx.github.create_repo(credentials.owner, credentials.repo_name, credentials.token)
    logger.debug("Remote provisioning outcome: %s", outcome)

    if isinstance(outcome, RepoCreated):
        ctx.console.success(f"✅ Created GitHub repo: {full_name}")
    elif isinstance(outcome, RepoAlreadyExists):
        ctx.console.info("ℹ️  Repo likely already exists on GitHub; proceeding to add remote.")
    elif isinstance(outcome, RepoCreationSkipped):
        if outcome.reason == NO_TOKEN_REASON:
            ctx.console.warning(
                "⚠️  No GitHub token found. Set env var GITHUB_TOKEN or pass --token <VALUE>."
            )
            ctx.console.warning("   Skipping remote repo creation; local git is still set up.")
    else:
        if outcome.status is None:
            ctx.console.warning(f"⚠️  Could not reach GitHub: {outcome.body}")
        else:
            ctx.console.warning(f"⚠️  GitHub API response ({outcome.status}): {outcome.body}")
        ctx.console.warning("   You can still add the remote manually later.")
    return outcome


def link_and_push(ctx: SproutContext, root: Path, credentials: GithubCredentials) -> GitPrepState:
    """Point origin at the GitHub repository and push the default branch.

    Raises:
        ExternalProcessError: If linking or pushing fails
    """
    url = ctx.config.remote_url(credentials.owner, credentials.repo_name)
    ctx.console.info(f"🔗 Linking '{DEFAULT_BRANCH}' to {url}")
    ctx.git.set_origin(root, url, DEFAULT_BRANCH)
    ctx.git.push_current_branch(root, DEFAULT_BRANCH)
    ctx.console.success("🔗 Remote linked successfully.")
    return GitPrepState.PUSHED


def run_git_workflow(
    ctx: SproutContext, root: Path, remote: RemoteRequest | None
) -> WorkflowResult:
    """Run local setup, then optional provisioning, linking and pushing.

    Args:
        ctx: Application context
        root: Project root (must exist)
        remote: Remote request, or None to stop at LOCAL_READY

    Returns:
        WorkflowResult listing every state visited
    """
    states = [GitPrepState.UNINITIALIZED, initialize_local(ctx, root)]
    if remote is None:
        return WorkflowResult(states=tuple(states))

    outcome = provision_remote(ctx, remote.credentials)
    states.append(_state_for(outcome))

    no_token = isinstance(outcome, RepoCreationSkipped) and outcome.reason == NO_TOKEN_REASON
    if no_token and not remote.link_when_skipped:
        ctx.console.info("   Skipping remote link; pass --link to push to an existing repo.")
        return WorkflowResult(states=tuple(states), outcome=outcome)

    states.append(GitPrepState.REMOTE_LINKED)
    states.append(link_and_push(ctx, root, remote.credentials))
    return WorkflowResult(states=tuple(states), outcome=outcome)


def _state_for(outcome: RepoCreationOutcome) -> GitPrepState:
    if isinstance(outcome, RepoCreated):
        return GitPrepState.REMOTE_CREATED
    if isinstance(outcome, RepoAlreadyExists):
        return GitPrepState.REMOTE_EXISTS
    if isinstance(outcome, RepoCreationSkipped):
        return GitPrepState.REMOTE_SKIPPED
    return GitPrepState.REMOTE_CREATE_FAILED
