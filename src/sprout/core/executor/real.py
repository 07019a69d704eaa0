"""Production command executor using subprocess."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from sprout.core.errors import ExternalProcessError
from sprout.core.executor.abc import CommandExecutor

logger = logging.getLogger(__name__)


class RealCommandExecutor(CommandExecutor):
    """Runs commands with subprocess.run, inheriting stdin/stdout/stderr.

    Inherited streams mean the user sees the tool's own output (git's
    progress, hints and errors) unfiltered.
    """

    def execute(self, cwd: Path, cmd: Sequence[str], *, quiet: bool = False) -> int:
        logger.debug("Executing %s in %s", list(cmd), cwd)
        output = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(
                list(cmd),
                cwd=cwd,
                check=False,
                stdout=output,
                stderr=output,
            )
        except FileNotFoundError as e:
            # subprocess reports a missing cwd and a missing program the same way
            if not cwd.is_dir():
                raise ExternalProcessError(
                    cmd, f"run {cmd[0]} in {cwd} (directory does not exist)"
                ) from e
            raise ExternalProcessError(cmd, f"start {cmd[0]} (command not found)") from e
        logger.debug("Exit code %d from %s", result.returncode, cmd[0])
        return result.returncode
