"""Minimal flag parser shared by every sprout command.

Rules:
- The positional value is the first token that does not start with a dash.
- A dash-prefixed token takes the next token as its value unless that one is
  dash-prefixed too; otherwise it is a boolean flag.
- One and two leading dashes are treated alike; callers resolve aliases
  such as `-n` / `--name`.
- Later occurrences win, across aliases as well as for the same token.
- Unknown flags are kept and simply never looked up.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedArgs:
    """Result of parse_flags().

    flags preserves last-occurrence order: a flag repeated later in the
    argument list moves to the end.
    """

    positional: str | None
    flags: dict[str, str | bool] = field(default_factory=dict)

    def has(self, *names: str) -> bool:
        """Check whether any of the given flag tokens appeared."""
        return any(name in self.flags for name in names)

    def value(self, *names: str) -> str | None:
        """Return the value of whichever alias appeared last.

        Boolean occurrences count as "no value" and give None.
        """
        for token, value in reversed(self.flags.items()):
            if token in names:
                return value if isinstance(value, str) else None
        return None

    def name_or_positional(self, *names: str) -> str | None:
        """Value of the given name flags, falling back to the positional token."""
        value = self.value(*names)
        if value is not None:
            return value
        return self.positional


def parse_flags(args: Sequence[str]) -> ParsedArgs:
    """Split raw arguments into a positional value and a flag mapping.

    Example:
        >>> parse_flags(["Demo", "--template", "java-assignment", "--git"])
        ParsedArgs(positional='Demo', flags={'--template': 'java-assignment', '--git': True})
    """
    positional = next((arg for arg in args if not arg.startswith("-")), None)

    flags: dict[str, str | bool] = {}
    i = 0
    while i < len(args):
        token = args[i]
        if token.startswith("-"):
            value: str | bool = True
            if i + 1 < len(args) and not args[i + 1].startswith("-"):
                value = args[i + 1]
                i += 1
            # Re-insert so dict order tracks the last occurrence
            flags.pop(token, None)
            flags[token] = value
        i += 1

    return ParsedArgs(positional=positional, flags=flags)
