"""Abstract interface for running external commands."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class CommandExecutor(ABC):
    """Runs a command to completion in a directory and reports its exit code.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def execute(self, cwd: Path, cmd: Sequence[str], *, quiet: bool = False) -> int:
        """Run `cmd` synchronously in `cwd`.

        Args:
            cwd: Working directory for the command
            cmd: Program and arguments
            quiet: If True, discard the command's output instead of letting it
                   reach the user's terminal

        Returns:
            Process exit code

        Raises:
            ExternalProcessError: If the program cannot be started
        """
        ...
