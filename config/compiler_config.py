"""
Compiler configuration module for managing toolchain and classpath settings.
"""

import logging
import os
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_BUILD_PATH = "target/classes"
DEFAULT_TIMEOUT_SECONDS = 120


def _split_paths(value: str) -> List[str]:
    return [path for path in value.split(os.pathsep) if path.strip()]


class CompilerConfig:
    """Configuration class for test compilation settings."""

    def __init__(self):
        self.java_home = None
        self.lib_paths = []
        self.junit_lib_paths = []
        self.build_path = DEFAULT_BUILD_PATH
        self.timeout_seconds = DEFAULT_TIMEOUT_SECONDS

    def set_java_home(self, path: Optional[str]):
        """Set the toolchain home the compiler is searched under."""
        self.java_home = path

    def get_java_home(self) -> Optional[str]:
        """Get the toolchain home directory."""
        return self.java_home

    def set_lib_paths(self, paths: List[str]):
        """Set the library classpath entries."""
        self.lib_paths = list(paths)

    def get_lib_paths(self) -> List[str]:
        """Get the library classpath entries."""
        return list(self.lib_paths)

    def set_junit_lib_paths(self, paths: List[str]):
        """Set the test framework classpath entries."""
        self.junit_lib_paths = list(paths)

    def get_junit_lib_paths(self) -> List[str]:
        """Get the test framework classpath entries."""
        return list(self.junit_lib_paths)

    def set_build_path(self, path: str):
        """Set the project build output path."""
        self.build_path = path

    def get_build_path(self) -> str:
        """Get the project build output path."""
        return self.build_path

    def set_timeout_seconds(self, seconds: Optional[float]):
        """Set the compiler process timeout (None disables it)."""
        self.timeout_seconds = seconds

    def get_timeout_seconds(self) -> Optional[float]:
        """Get the compiler process timeout."""
        return self.timeout_seconds

    def load_from_env(self, environ=None):
        """
        Fill unset values from environment variables.

        JAVA_HOME provides the toolchain home, TESTGEN_LIB_PATHS and
        TESTGEN_JUNIT_PATHS hold os.pathsep separated classpath entries and
        TESTGEN_COMPILE_TIMEOUT the timeout in seconds.
        """
        environ = os.environ if environ is None else environ

        if not self.java_home and environ.get("JAVA_HOME"):
            self.java_home = environ["JAVA_HOME"]
        if not self.lib_paths and environ.get("TESTGEN_LIB_PATHS"):
            self.lib_paths = _split_paths(environ["TESTGEN_LIB_PATHS"])
        if not self.junit_lib_paths and environ.get("TESTGEN_JUNIT_PATHS"):
            self.junit_lib_paths = _split_paths(environ["TESTGEN_JUNIT_PATHS"])

        timeout = environ.get("TESTGEN_COMPILE_TIMEOUT")
        if timeout:
            try:
                seconds = float(timeout)
            except ValueError:
                seconds = -1
            if seconds < 0:
                logger.warning(f"Ignoring invalid TESTGEN_COMPILE_TIMEOUT value: {timeout!r}")
            else:
                # 0 disables the timeout
                self.timeout_seconds = seconds or None

    def reset(self):
        """Restore the default settings."""
        self.__init__()

# Create a singleton instance
_config = CompilerConfig()

# Export all methods and attributes from the singleton instance
set_java_home = _config.set_java_home
get_java_home = _config.get_java_home
set_lib_paths = _config.set_lib_paths
get_lib_paths = _config.get_lib_paths
set_junit_lib_paths = _config.set_junit_lib_paths
get_junit_lib_paths = _config.get_junit_lib_paths
set_build_path = _config.set_build_path
get_build_path = _config.get_build_path
set_timeout_seconds = _config.set_timeout_seconds
get_timeout_seconds = _config.get_timeout_seconds
load_from_env = _config.load_from_env
reset = _config.reset
