"""`sprout web`: shortcut for the web-basic template with CDN options."""

from sprout.cli.commands.shared import require_name, sign_off
from sprout.cli.flags import ParsedArgs
from sprout.core.context import SproutContext
from sprout.core.provisioning import run_git_workflow
from sprout.core.templates import WebBasic, render


def handle_web(ctx: SproutContext, args: ParsedArgs) -> None:
    name = require_name(ctx, args, "Site folder name")
    template = WebBasic(tailwind=args.has("--tailwind"), bootstrap=args.has("--bootstrap"))
    scaffold = render(template, name, ctx.time.today())

    root = ctx.cwd / name
    ctx.console.info(f"📁 Creating folder: {name}")
    ctx.console.info(f"🌸 Applying template: {scaffold.label}")
    ctx.writer.apply(root, scaffold)

    if args.has("--git"):
        run_git_workflow(ctx, root, None)

    sign_off(ctx, f"Web project ready at: {root.resolve()}")
