"""
Compiler discovery inside an installed toolchain (e.g. a JDK home).
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Union

from .exceptions import ToolchainNotFoundError

logger = logging.getLogger(__name__)


class ToolchainLocator:
    """
    Finds a compiler executable by exact file name under a root directory.

    The search walks the tree top-down, looking at the files of a directory
    before descending into its subdirectories. Names are visited in sorted
    order, so the first match is stable for a given tree. If several
    executables with the same name exist, only the first one is used.
    """

    def __init__(self, executable_name: str):
        self.executable_name = executable_name

    def _candidates(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for filename in sorted(filenames):
                if filename == self.executable_name:
                    yield Path(dirpath) / filename

    def locate(self, root: Union[str, Path]) -> Path:
        """
        Locate the compiler executable under root.

        Args:
            root: Toolchain home directory to search

        Returns:
            Absolute path to the first matching executable file

        Raises:
            ToolchainNotFoundError: If root is not a directory or holds no match
        """
        root_path = Path(root).expanduser()
        if root_path.is_dir():
            for candidate in self._candidates(root_path):
                if candidate.is_file() and os.access(candidate, os.X_OK):
                    resolved = candidate.resolve()
                    logger.info(f"Using compiler {resolved}")
                    return resolved
                logger.debug(f"Skipping non-executable match {candidate}")

        error = ToolchainNotFoundError(root, self.executable_name)
        logger.error(str(error))
        raise error
