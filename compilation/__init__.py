"""
Compilation of generated test files with an external toolchain.
"""

from .base import TestCompiler
from .classpath import ClasspathBuilder
from .exceptions import CompilationError, ProcessLaunchError, ProcessTimeoutError, ToolchainNotFoundError
from .factory import TEST_COMPILERS, create_test_compiler
from .java import JavaTestCompiler
from .models import CompilationResult, TestCasesCompilationResult
from .process import ProcessRunner, run_command
from .toolchain import ToolchainLocator

__all__ = [
    'TestCompiler',
    'JavaTestCompiler',
    'ClasspathBuilder',
    'ProcessRunner',
    'run_command',
    'ToolchainLocator',
    'CompilationResult',
    'TestCasesCompilationResult',
    'CompilationError',
    'ToolchainNotFoundError',
    'ProcessLaunchError',
    'ProcessTimeoutError',
    'TEST_COMPILERS',
    'create_test_compiler',
]
