"""Application context with dependency injection."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from sprout.core.config import SproutConfig, load_config
from sprout.core.console import ClickConsole, Console
from sprout.core.executor.real import RealCommandExecutor
from sprout.core.git.abc import Git
from sprout.core.git.dry_run import DryRunGit
from sprout.core.git.real import RealGit
from sprout.core.github.abc import GitHub
from sprout.core.github.dry_run import DryRunGitHub
from sprout.core.github.real import RealGitHub
from sprout.core.prompter import ClickPrompter, Prompter
from sprout.core.time.abc import Time
from sprout.core.time.real import RealTime
from sprout.core.writer import ScaffoldWriter


@dataclass(frozen=True)
class SproutContext:
    """Immutable context holding all dependencies for sprout operations.

    Created at CLI entry point and threaded through the command handlers.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    console: Console
    prompter: Prompter
    time: Time
    config: SproutConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @property
    def writer(self) -> ScaffoldWriter:
        """Scaffold writer bound to this context's console and dry-run mode."""
        return ScaffoldWriter(self.console, dry_run=self.dry_run)

    def with_dry_run(self) -> "SproutContext":
        """Return a copy whose git and GitHub mutations only print intent."""
        if self.dry_run:
            return self
        return SproutContext(
            git=DryRunGit(self.git, self.console),
            github=DryRunGitHub(self.github, self.console),
            console=self.console,
            prompter=self.prompter,
            time=self.time,
            config=self.config,
            cwd=self.cwd,
            dry_run=True,
        )


def create_context(*, dry_run: bool, environ: Mapping[str, str] | None = None) -> SproutContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, wrap git and GitHub with dry-run wrappers that print
                 intended actions without executing them
        environ: Environment to read configuration from (defaults to os.environ)

    Returns:
        SproutContext with real implementations

    Example:
        >>> ctx = create_context(dry_run=False)
        >>> ctx.git.has_origin(ctx.cwd)
    """
    # 1. Capture cwd and configuration (no deps)
    cwd = Path.cwd()
    config = load_config(environ)

    # 2. Create integration classes
    console: Console = ClickConsole()
    git: Git = RealGit(RealCommandExecutor(), console)
    github: GitHub = RealGitHub(api_url=config.github_api_url)

    ctx = SproutContext(
        git=git,
        github=github,
        console=console,
        prompter=ClickPrompter(),
        time=RealTime(),
        config=config,
        cwd=cwd,
        dry_run=False,
    )

    # 3. Apply dry-run wrappers if needed
    if dry_run:
        return ctx.with_dry_run()
    return ctx
