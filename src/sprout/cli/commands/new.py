"""`sprout new`: plant a project from a named template."""

import logging

from sprout.cli.commands.shared import remote_request, require_name, sign_off
from sprout.cli.constants import TEMPLATE_IDENTIFIERS
from sprout.cli.flags import ParsedArgs
from sprout.core.context import SproutContext
from sprout.core.errors import UserInputError
from sprout.core.provisioning import run_git_workflow
from sprout.core.templates import render_identifier

logger = logging.getLogger(__name__)


def handle_new(ctx: SproutContext, args: ParsedArgs) -> None:
    """Scaffold `<name>/` from --template, then optionally commit and publish.

    An unknown template stops the command before anything is written; that
    is reported, not raised.
    """
    name = require_name(ctx, args, "Project name")

    identifier = args.value("--template", "-t")
    if identifier is None or not identifier.strip():
        identifier = ctx.prompter.prompt(f"Template ({' | '.join(TEMPLATE_IDENTIFIERS)})")
    if identifier is None or not identifier.strip():
        raise UserInputError("Template is required.")

    scaffold = render_identifier(
        identifier,
        name,
        ctx.time.today(),
        tailwind=args.has("--tailwind"),
        bootstrap=args.has("--bootstrap"),
    )
    if not scaffold.scaffolded:
        logger.debug("Unknown template identifier %r", identifier)
        ctx.console.warning("🌧️ Oh no! That template doesn't exist.")
        ctx.console.info(f"🌱 Try: --template {' | '.join(TEMPLATE_IDENTIFIERS)}")
        return

    root = ctx.cwd / name
    ctx.console.info(f"📁 Creating folder: {name}")
    ctx.console.info(f"🌸 Applying template: {scaffold.label}")
    ctx.writer.apply(root, scaffold)

    remote = remote_request(ctx, args, default_repo=name)
    if args.has("--git") or remote is not None:
        run_git_workflow(ctx, root, remote)

    sign_off(ctx, f"Done! Created project at: {root.resolve()}")
