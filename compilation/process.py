"""
External process execution for compiler invocations.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from .exceptions import ProcessLaunchError, ProcessTimeoutError

logger = logging.getLogger(__name__)


def _as_text(output: Union[str, bytes, None]) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


class ProcessRunner:
    """
    Runs a command and returns its combined output.

    The command is executed as an argument vector without a shell, so no
    quoting or escaping is applied and tokens containing spaces are passed
    through as single arguments. Exit codes and output are not interpreted.
    """

    def __init__(self, timeout_seconds: Optional[float] = None):
        self.timeout_seconds = timeout_seconds or None

    def run(self, command: Sequence[str], cwd: Optional[Union[str, Path]] = None) -> str:
        """
        Execute a command and wait for it to finish.

        Args:
            command: Ordered command-line tokens, executable first
            cwd: Optional working directory for the process

        Returns:
            Captured stdout and stderr, merged

        Raises:
            ProcessLaunchError: If the process could not be started
            ProcessTimeoutError: If the process was killed after the timeout
        """
        command = [str(token) for token in command]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                cwd=str(cwd) if cwd else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.timeout_seconds,
                check=False
            )
        except subprocess.TimeoutExpired as e:
            output = _as_text(e.output)
            logger.error(f"Process timed out after {self.timeout_seconds}s: {command[0]}")
            raise ProcessTimeoutError(command, self.timeout_seconds, output) from e
        except (OSError, ValueError) as e:
            logger.error(f"Failed to start process {command[0] if command else ''}: {e}")
            raise ProcessLaunchError(command, str(e)) from e

        logger.debug(f"Process exited with code {result.returncode}")
        return result.stdout or ""


def run_command(command: Sequence[str], cwd: Optional[Union[str, Path]] = None,
                timeout_seconds: Optional[float] = None) -> str:
    """Run a command once with a fresh runner and return its output."""
    return ProcessRunner(timeout_seconds).run(command, cwd=cwd)
