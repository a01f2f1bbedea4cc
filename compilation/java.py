from typing import List

from utils.platform import is_windows

from .base import TestCompiler


class JavaTestCompiler(TestCompiler):
    """Compiles generated JUnit test classes with the JDK's javac."""

    executable_name = "javac.exe" if is_windows() else "javac"
    source_extension = ".java"
    artifact_extension = ".class"

    def build_command(self, source_path: str, classpath: str) -> List[str]:
        # No -d option: javac writes the class file next to the source by default
        return [self.compiler_path, "-cp", classpath, source_path]
