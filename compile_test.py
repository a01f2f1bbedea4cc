#!/usr/bin/env python3

"""
Command line entry point: compile generated test files and report the verdicts.
"""

import logging
import sys
from typing import List, Optional

from cli.arguments import parse_args
from cli.output import print_error, print_result, print_step, print_success, print_summary
from compilation import ProcessRunner, ToolchainNotFoundError, create_test_compiler
from config import compiler_config
from utils.logging import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_COMPILE_FAILURE = 1
EXIT_TOOLCHAIN_NOT_FOUND = 2

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the test compiler."""
    args = parse_args(argv)
    setup_logging(args.log_dir, args.log_level)

    java_home = compiler_config.get_java_home()
    if not java_home:
        print_error("No JDK configured. Pass --java-home or set JAVA_HOME.")
        return EXIT_TOOLCHAIN_NOT_FOUND

    print_step("Locating javac")
    try:
        compiler = create_test_compiler(
            "java",
            compiler_config.get_lib_paths(),
            compiler_config.get_junit_lib_paths(),
            java_home,
            runner=ProcessRunner(compiler_config.get_timeout_seconds())
        )
    except ToolchainNotFoundError as e:
        print_error(str(e))
        return EXIT_TOOLCHAIN_NOT_FOUND
    print_success(f"Using {compiler.compiler_path}")

    build_path = compiler_config.get_build_path()
    if args.print_classpath:
        print_success(f"Classpath: {compiler.get_class_paths(build_path) or '(empty)'}")

    print_step(f"Compiling {len(args.sources)} file(s)")
    result = compiler.compile_test_cases(args.sources, build_path, args.working_dir)
    for source_result in result.results.values():
        print_result(source_result)

    print_summary(len(result.compilable_test_cases), len(result.results))
    return EXIT_OK if result.all_test_cases_compilable else EXIT_COMPILE_FAILURE

if __name__ == "__main__":
    sys.exit(main())
