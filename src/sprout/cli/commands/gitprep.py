"""`sprout gitprep`: add git (and optionally GitHub) to an existing folder."""

from sprout.cli.commands.shared import remote_request, sign_off
from sprout.cli.flags import ParsedArgs
from sprout.core.context import SproutContext
from sprout.core.errors import UserInputError
from sprout.core.provisioning import run_git_workflow
from sprout.core.templates import render_gitprep_files


def handle_gitprep(ctx: SproutContext, args: ParsedArgs) -> None:
    """Initialize git in --path (default: current directory).

    Unless --no-files is given, a README.md and .gitignore are added first
    (existing ones are kept). With --github the repository is provisioned,
    linked as origin and pushed.

    Raises:
        UserInputError: If --path does not point at an existing directory
    """
    root = ctx.cwd / (args.value("--path") or ".")
    if not root.is_dir():
        raise UserInputError(f"Path does not exist: {root.resolve()}")

    dir_name = root.resolve().name
    if not args.has("--no-files"):
        ctx.writer.apply(root, render_gitprep_files(dir_name, ctx.time.today()))

    run_git_workflow(ctx, root, remote_request(ctx, args, default_repo=dir_name))

    sign_off(ctx, f"Git is ready in: {root.resolve()}")
