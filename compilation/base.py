"""
Language-independent orchestration for compiling generated tests.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .classpath import BuildPath, ClasspathBuilder
from .diagnostics import count_errors, count_warnings
from .exceptions import ProcessLaunchError, ProcessTimeoutError
from .models import CompilationResult, TestCasesCompilationResult
from .process import ProcessRunner
from .toolchain import ToolchainLocator

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TestCompiler(ABC):
    """
    Compiles generated test files with an external toolchain and decides
    whether each one compiled.

    Subclasses describe a single language: the compiler executable name,
    the source and artifact extensions, and the command line. The compiler
    executable is resolved once here and never changes afterwards.

    A compilation succeeds only if the expected artifact exists and the
    compiler printed nothing. Warnings therefore count as failures.
    """
    __test__ = False

    executable_name: str = ""
    source_extension: str = ""
    artifact_extension: str = ""

    def __init__(
        self,
        lib_paths: Sequence[str],
        junit_lib_paths: Sequence[str],
        toolchain_home: PathLike,
        locator: Optional[ToolchainLocator] = None,
        runner: Optional[ProcessRunner] = None,
        separator: Optional[str] = None
    ):
        """
        Args:
            lib_paths: Library classpath entries
            junit_lib_paths: Test framework classpath entries
            toolchain_home: Directory the compiler is searched under
            locator: Optional locator replacing the default name-based search
            runner: Optional process runner, e.g. one configured with a timeout
            separator: Optional classpath separator, defaults to the platform one

        Raises:
            ToolchainNotFoundError: If no compiler can be found under toolchain_home
        """
        self._classpath = ClasspathBuilder(list(lib_paths) + list(junit_lib_paths), separator)
        self._runner = runner or ProcessRunner()
        locator = locator or ToolchainLocator(self.executable_name)
        self._compiler_path = str(locator.locate(toolchain_home))

    @property
    def compiler_path(self) -> str:
        """Absolute path of the resolved compiler executable."""
        return self._compiler_path

    @property
    def separator(self) -> str:
        return self._classpath.separator

    @property
    def common_path(self) -> str:
        return self._classpath.common_path

    def get_class_paths(self, build_path: BuildPath = None) -> str:
        """
        Get the classpath used to compile against the given build output.

        Args:
            build_path: Project build output path (or paths)

        Returns:
            Library, test framework and build paths joined with the separator
        """
        return self._classpath.build(build_path)

    @abstractmethod
    def build_command(self, source_path: str, classpath: str) -> List[str]:
        """Build the compiler command line for a source file."""

    def get_artifact_path(self, source_path: PathLike, working_dir: Optional[PathLike] = None) -> Path:
        """
        Get the artifact the compiler is expected to write for a source file.

        The source extension is replaced by the artifact extension. Relative
        paths are resolved against working_dir when one is given.
        """
        path = str(source_path)
        if self.source_extension and path.endswith(self.source_extension):
            path = path[:-len(self.source_extension)]
        artifact = Path(path + self.artifact_extension)
        if working_dir and not artifact.is_absolute():
            artifact = Path(working_dir) / artifact
        return artifact

    def compile_code(
        self,
        source_path: PathLike,
        project_build_path: BuildPath = None,
        working_dir: Optional[PathLike] = None
    ) -> CompilationResult:
        """
        Compile a single source file.

        Args:
            source_path: Source file to compile
            project_build_path: Build output of the project under test
            working_dir: Optional working directory for the compiler process

        Returns:
            CompilationResult carrying the verdict and the raw diagnostics
        """
        source = str(source_path)
        artifact = self.get_artifact_path(source, working_dir)

        # A leftover artifact must not be mistaken for this run's output
        if artifact.is_file():
            logger.debug(f"Removing stale artifact {artifact}")
            try:
                artifact.unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"Cannot remove stale artifact {artifact}: {e}")
                return CompilationResult(
                    success=False,
                    diagnostics=f"Cannot remove stale artifact {artifact}: {e}",
                    outcome="compile_failure",
                    source_path=source,
                    artifact_path=str(artifact)
                )

        command = self.build_command(source, self.get_class_paths(project_build_path))

        try:
            diagnostics = self._runner.run(command, cwd=working_dir)
        except ProcessLaunchError as e:
            logger.error(f"Compiler could not be started for {source}: {e.reason}")
            return CompilationResult(
                success=False,
                diagnostics=str(e),
                outcome="launch_failure",
                source_path=source,
                artifact_path=str(artifact)
            )
        except ProcessTimeoutError as e:
            logger.error(f"Compilation of {source} timed out after {e.timeout_seconds}s")
            return CompilationResult(
                success=False,
                diagnostics=e.output or str(e),
                outcome="timed_out",
                source_path=source,
                artifact_path=str(artifact),
                error_count=count_errors(e.output)
            )

        logger.debug(f"Error message: '{diagnostics}'")
        success = artifact.exists() and not diagnostics.strip()

        if success:
            logger.info(f"Compiled {source}")
        else:
            logger.warning(f"Compilation failed for {source}")

        return CompilationResult(
            success=success,
            diagnostics=diagnostics,
            outcome="compiled" if success else "compile_failure",
            source_path=source,
            artifact_path=str(artifact),
            error_count=count_errors(diagnostics),
            warning_count=count_warnings(diagnostics)
        )

    def compile_test_cases(
        self,
        test_case_paths: Sequence[PathLike],
        build_path: BuildPath = None,
        working_dir: Optional[PathLike] = None
    ) -> TestCasesCompilationResult:
        """
        Compile generated test files one after another.

        Args:
            test_case_paths: Generated test source files
            build_path: Build output of the project under test
            working_dir: Optional working directory for the compiler process

        Returns:
            TestCasesCompilationResult listing the files that compiled
        """
        results = {}
        for path in test_case_paths:
            # Each file is compiled once, in first-seen order
            if str(path) not in results:
                results[str(path)] = self.compile_code(path, build_path, working_dir)
        compilable = [path for path, result in results.items() if result.success]

        logger.info(f"{len(compilable)}/{len(results)} test cases compiled")

        return TestCasesCompilationResult(
            all_test_cases_compilable=len(compilable) == len(results),
            compilable_test_cases=compilable,
            results=results
        )
