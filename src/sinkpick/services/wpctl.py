"""Client for the WirePlumber control utility (wpctl).

All external commands the picker runs go through WpctlClient. Calls are
synchronous and never retried: a hanging wpctl hangs the picker.
"""

import subprocess
from typing import Optional

from sinkpick.logging_config import get_logger

logger = get_logger(__name__)


class CommandExecutionError(Exception):
    """An external command could not be run or exited with failure."""

    def __init__(
        self,
        message: str,
        command: Optional[list[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr


class WpctlClient:
    """Runs ``wpctl`` subcommands.

    Args:
        wpctl_path: Name or path of the wpctl binary
    """

    def __init__(self, wpctl_path: str = "wpctl"):
        self.wpctl_path = wpctl_path

    def _run(self, *args: str) -> str:
        """Run wpctl with the given arguments and return its stdout.

        Raises:
            CommandExecutionError: If wpctl is missing or exits non-zero
        """
        cmd = [self.wpctl_path, *args]
        context = f"Error executing 'wpctl {' '.join(args)}'"
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            raise CommandExecutionError(f"{context}: {e}", command=cmd) from e

        if result.returncode != 0:
            cause = (result.stderr or result.stdout).strip()
            cause = cause or f"exit status {result.returncode}"
            raise CommandExecutionError(
                f"{context}: {cause}",
                command=cmd,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        return result.stdout

    def status(self) -> str:
        """Return the raw output of ``wpctl status``."""
        return self._run("status")

    def set_default(self, identifier: str) -> None:
        """Make the sink with the given id the default sink.

        Args:
            identifier: WirePlumber object id of the sink

        Raises:
            CommandExecutionError: If the id is empty or wpctl fails
        """
        if not identifier:
            raise CommandExecutionError(
                "Error executing 'wpctl set-default': sink has no identifier"
            )
        self._run("set-default", identifier)
        logger.info(f"Default sink set to id {identifier}")
