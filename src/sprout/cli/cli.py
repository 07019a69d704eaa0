import logging
import traceback
from collections.abc import Callable, Sequence

import click

from sprout.cli.commands.gitprep import handle_gitprep
from sprout.cli.commands.new import handle_new
from sprout.cli.commands.web import handle_web
from sprout.cli.constants import HELP_FLAGS
from sprout.cli.flags import ParsedArgs, parse_flags
from sprout.cli.help import GREETING, render_help
from sprout.core.context import SproutContext, create_context

logger = logging.getLogger(__name__)

CommandHandler = Callable[[SproutContext, ParsedArgs], None]

COMMANDS: dict[str, CommandHandler] = {
    "new": handle_new,
    "web": handle_web,
    "gitprep": handle_gitprep,
}

# Arguments are handed to the sprout flag parser untouched
CONTEXT_SETTINGS = dict(
    help_option_names=[],
    ignore_unknown_options=True,
    allow_interspersed_args=False,
)


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def dispatch(ctx: SproutContext, argv: Sequence[str]) -> int:
    """Run one sprout command and return the process exit code.

    This is the single error boundary: any exception escaping a handler is
    reported as "Uh-oh! <message>" with its traceback and turns into exit 1.
    Help requests and unknown commands exit 0.
    """
    if not argv or any(arg in HELP_FLAGS for arg in argv):
        ctx.console.info(GREETING)
        ctx.console.info(render_help())
        return 0

    command = argv[0].lower()
    handler = COMMANDS.get(command)
    if handler is None:
        ctx.console.info(f"Unknown command: {command}")
        ctx.console.info(render_help())
        return 0

    args = parse_flags(argv[1:])
    configure_logging(args.has("--debug") or ctx.config.debug)
    if args.has("--dry-run"):
        ctx = ctx.with_dry_run()
    logger.debug("Dispatching %s with flags=%s positional=%r", command, args.flags, args.positional)

    try:
        handler(ctx, args)
    except Exception as e:
        ctx.console.error(f"Uh-oh! {e}")
        ctx.console.error(traceback.format_exc().rstrip())
        return 1
    return 0


@click.command("sprout", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="sprout")
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, argv: tuple[str, ...]) -> None:
    """Plant a project skeleton, commit it, and push it to GitHub."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=False)
    raise SystemExit(dispatch(ctx.obj, argv))


def main() -> None:
    """CLI entry point used by the `sprout` console script."""
    cli()
