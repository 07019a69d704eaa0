"""Blocking interactive input, injected so handlers can be tested headless."""

from abc import ABC, abstractmethod

import click


class Prompter(ABC):
    """Source of answers to interactive questions."""

    @abstractmethod
    def prompt(self, label: str) -> str | None:
        """Ask for a single line of input.

        Args:
            label: Question shown to the user (without trailing colon)

        Returns:
            The line entered, or None at end of input
        """


class ClickPrompter(Prompter):
    """Reads one line from standard input via click.prompt."""

    def prompt(self, label: str) -> str | None:
        try:
            return click.prompt(label, default="", show_default=False)
        except click.Abort:
            # click raises Abort on EOF and Ctrl-C alike
            return None
