from typing import Dict, Literal, Sequence, Type

from .base import PathLike, TestCompiler
from .java import JavaTestCompiler

Language = Literal["java"]

TEST_COMPILERS: Dict[str, Type[TestCompiler]] = {
    "java": JavaTestCompiler,
}


def create_test_compiler(
    language: Language,
    lib_paths: Sequence[str],
    junit_lib_paths: Sequence[str],
    toolchain_home: PathLike,
    **kwargs
) -> TestCompiler:
    """
    Create the test compiler for a source language.

    Args:
        language: Source language of the generated tests (e.g. "java")
        lib_paths: Library classpath entries
        junit_lib_paths: Test framework classpath entries
        toolchain_home: Directory the compiler is searched under
        **kwargs: Passed on to the compiler (locator, runner, separator)

    Raises:
        ValueError: If no compiler is registered for the language
        ToolchainNotFoundError: If the compiler executable cannot be found
    """
    compiler_class = TEST_COMPILERS.get(language.lower())
    if compiler_class is None:
        raise ValueError(f"No test compiler for language '{language}'. Expected one of: {', '.join(TEST_COMPILERS)}")
    return compiler_class(lib_paths, junit_lib_paths, toolchain_home, **kwargs)
