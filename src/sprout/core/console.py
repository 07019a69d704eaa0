"""User-facing output, injected so commands never touch process streams."""

from abc import ABC, abstractmethod

import click


class Console(ABC):
    """Line-oriented output sink with a standard and an error channel.

    Usage:
        ctx.console.info("📁 Creating folder: demo")
        ctx.console.success("✔️ Git initialized and first commit made.")
        ctx.console.error("Uh-oh! something broke")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Write a plain line to the standard channel."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Write a line reporting a completed step to the standard channel."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Write a non-fatal warning to the standard channel."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Write a line to the error channel."""


class ClickConsole(Console):
    """Console backed by click.echo, styled when attached to a terminal."""

    def info(self, message: str) -> None:
        click.echo(message)

    def success(self, message: str) -> None:
        click.echo(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        click.echo(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        click.echo(click.style(message, fg="red"), err=True)
