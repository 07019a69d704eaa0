"""Helpers shared by the command handlers."""

from sprout.cli.flags import ParsedArgs
from sprout.core.context import SproutContext
from sprout.core.errors import UserInputError
from sprout.core.provisioning import GithubCredentials, RemoteRequest, resolve_token


def require_name(ctx: SproutContext, args: ParsedArgs, label: str) -> str:
    """Project name from --name/-n or the positional token, else prompt.

    Raises:
        UserInputError: If the name is still blank after prompting
    """
    name = args.name_or_positional("--name", "-n")
    if name is None or not name.strip():
        name = ctx.prompter.prompt(label)
    if name is None or not name.strip():
        raise UserInputError(f"{label} is required.")
    return name.strip()


def remote_request(ctx: SproutContext, args: ParsedArgs, default_repo: str) -> RemoteRequest | None:
    """Build the GitHub request from --github/--repo/--token/--link, if any.

    Raises:
        UserInputError: If --github is given without a username
    """
    if not args.has("--github"):
        return None

    owner = args.value("--github")
    if owner is None or not owner.strip():
        raise UserInputError("--github needs a GitHub username, e.g. --github octocat")

    repo_name = args.value("--repo") or default_repo
    credentials = GithubCredentials(
        owner=owner.strip(),
        repo_name=repo_name.strip(),
        token=resolve_token(args.value("--token"), ctx.config),
    )
    return RemoteRequest(credentials=credentials, link_when_skipped=args.has("--link"))


def sign_off(ctx: SproutContext, headline: str) -> None:
    ctx.console.success(f"\n✨ {headline}")
    ctx.console.info("🌿 Happy coding!")
