"""
Exceptions raised by the compilation subsystem.
"""

from pathlib import Path
from typing import List, Union


class CompilationError(RuntimeError):
    """Base class for all compilation subsystem errors."""


class ToolchainNotFoundError(CompilationError):
    """Raised when no compiler executable can be found under a toolchain home."""

    def __init__(self, root: Union[str, Path], executable_name: str):
        self.root = str(root)
        self.executable_name = executable_name
        super().__init__(
            f"Cannot find compiler '{executable_name}' at {self.root}. "
            f"Ensure a JDK is configured for the project."
        )


class ProcessLaunchError(CompilationError):
    """Raised when an external process could not be started at all."""

    def __init__(self, command: List[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Could not start '{self.command[0] if self.command else ''}': {reason}")


class ProcessTimeoutError(CompilationError):
    """Raised when an external process was killed after exceeding its timeout."""

    def __init__(self, command: List[str], timeout_seconds: float, output: str = ""):
        self.command = list(command)
        self.timeout_seconds = timeout_seconds
        self.output = output
        super().__init__(f"Process '{self.command[0] if self.command else ''}' timed out after {timeout_seconds}s")
