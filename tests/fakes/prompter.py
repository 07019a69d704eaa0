"""Fake Prompter implementation for testing."""

from sprout.core.prompter import Prompter


class FakePrompter(Prompter):
    """Returns scripted answers in order, then None (end of input).

    Examples:
        >>> prompter = FakePrompter(answers=["Demo"])
        >>> prompter.prompt("Project name")
        'Demo'
        >>> prompter.prompt("Template") is None
        True
    """

    def __init__(self, answers: list[str] | None = None) -> None:
        self._answers = list(answers or [])
        self._labels: list[str] = []

    @property
    def labels(self) -> list[str]:
        """Questions that were asked, in order."""
        return self._labels

    def prompt(self, label: str) -> str | None:
        self._labels.append(label)
        if not self._answers:
            return None
        return self._answers.pop(0)
