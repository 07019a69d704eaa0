"""Error taxonomy for sprout.

Only the dispatcher in `sprout.cli.cli` catches these broadly; everything
else lets them propagate.
"""

from collections.abc import Sequence
from pathlib import Path


class SproutError(Exception):
    """Base class for all errors raised deliberately by sprout."""


class UserInputError(SproutError):
    """The invocation is missing something only the user can supply."""


class FilesystemError(SproutError):
    """Creating a directory or writing a scaffold file failed."""

    def __init__(self, path: Path, action: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Could not {action} {path}: {cause.strerror or cause}")


class ExternalProcessError(SproutError):
    """A version-control subprocess exited non-zero or could not start."""

    def __init__(
        self,
        cmd: Sequence[str],
        operation_context: str,
        exit_code: int | None = None,
    ) -> None:
        self.cmd = list(cmd)
        self.operation_context = operation_context
        self.exit_code = exit_code

        message = f"Failed to {operation_context}"
        message += f"\nCommand: {' '.join(self.cmd)}"
        if exit_code is not None:
            message += f"\nExit code: {exit_code}"
        super().__init__(message)


class NetworkError(SproutError):
    """The forge API could not be reached."""


class ApiError(SproutError):
    """The forge API answered with an unexpected status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"GitHub API response ({status}): {body}")
