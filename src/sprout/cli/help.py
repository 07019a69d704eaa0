"""Usage guidance printed for `sprout`, `sprout --help` and unknown commands."""

from sprout.cli.constants import TEMPLATE_IDENTIFIERS

GREETING = "🌱 Sprout is ready to plant your next project!"


def render_help() -> str:
    templates = " | ".join(TEMPLATE_IDENTIFIERS)
    return f"""\
Usage: sprout <command> [options]

Commands:
  new [<name>] [--name|-n <name>] [--template|-t <template>] [--git]
      [--github <user> [--repo <name>] [--token <token>] [--link]]
      Create a project folder from a template.

  web [<name>] [--name|-n <name>] [--tailwind] [--bootstrap] [--git]
      Create a static web starter (index.html, style.css, app.js).

  gitprep [--path <dir>] [--no-files]
      [--github <user> [--repo <name>] [--token <token>] [--link]]
      Initialize git in an existing folder and optionally push to GitHub.

Templates: {templates}

Options for every command:
  --dry-run     Show what would happen without writing or running anything
  --debug       Print diagnostic logging
  --help, -h    Show this guide

GITHUB_TOKEN is used when --token is absent. Without a token the GitHub repo
is not created; --link still links origin and pushes to an existing repo.

Example:
  sprout new CozyQuest --template java-assignment --git --github mintbanshee
"""
