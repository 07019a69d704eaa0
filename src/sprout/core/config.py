"""Environment-driven configuration.

Sprout keeps no configuration files. Everything it reads comes from the
process environment once, at the CLI entry point, and is frozen into a
SproutConfig that lives on the context.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from sprout.cli.constants import GITHUB_TOKEN_ENV

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_WEB_URL = "https://github.com"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class SproutConfig:
    """Immutable configuration loaded at the CLI entry point."""

    github_token: str | None
    github_api_url: str
    github_web_url: str
    debug: bool

    def remote_url(self, owner: str, repo_name: str) -> str:
        """Clone URL for `owner/repo_name` on the configured forge."""
        return f"{self.github_web_url.rstrip('/')}/{owner}/{repo_name}.git"


def load_config(environ: Mapping[str, str] | None = None) -> SproutConfig:
    """Build a SproutConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        SproutConfig with blank values normalized to None/defaults
    """
    env = os.environ if environ is None else environ

    token = env.get(GITHUB_TOKEN_ENV, "").strip() or None

    return SproutConfig(
        github_token=token,
        github_api_url=env.get("SPROUT_GITHUB_API_URL", "").strip() or DEFAULT_API_URL,
        github_web_url=env.get("SPROUT_GITHUB_WEB_URL", "").strip() or DEFAULT_WEB_URL,
        debug=env.get("SPROUT_DEBUG", "").strip().lower() in _TRUTHY,
    )
