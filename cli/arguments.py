import argparse
import logging
from pathlib import Path
from typing import List, Optional

from config import compiler_config

logger = logging.getLogger(__name__)

def validate_source_files(sources: List[str]) -> List[Path]:
    """
    Validate the source files to compile.

    Args:
        sources: Source file paths given on the command line

    Returns:
        Source files as Path objects

    Raises:
        ValueError: If a file does not have the .java extension
    """
    paths = []
    for source in sources:
        path = Path(source)
        if path.suffix != '.java':
            raise ValueError(f"Source file must be a .java file: {source}")
        paths.append(path)
    return paths

def validate_timeout(timeout: Optional[float]) -> Optional[float]:
    """
    Validate the compiler timeout.

    Args:
        timeout: Timeout in seconds, 0 or None to disable

    Returns:
        The timeout, or None when disabled

    Raises:
        ValueError: If the timeout is negative
    """
    if timeout is None or timeout == 0:
        return None
    if timeout < 0:
        raise ValueError("--timeout must not be negative")
    return timeout

def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description='Compile generated Java test files with javac and report whether they compiled',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        'sources',
        nargs='+',
        help='Generated test source files to compile'
    )

    # Toolchain and classpath
    parser.add_argument(
        '--java-home',
        type=str,
        default=None,
        help='JDK home to search for javac (defaults to $JAVA_HOME)'
    )
    parser.add_argument(
        '--lib-path',
        dest='lib_paths',
        action='append',
        default=[],
        help='Library classpath entry (repeatable, defaults to $TESTGEN_LIB_PATHS)'
    )
    parser.add_argument(
        '--junit-path',
        dest='junit_lib_paths',
        action='append',
        default=[],
        help='JUnit classpath entry (repeatable, defaults to $TESTGEN_JUNIT_PATHS)'
    )
    parser.add_argument(
        '--build-path',
        type=str,
        default=compiler_config.DEFAULT_BUILD_PATH,
        help='Build output of the project under test'
    )
    parser.add_argument(
        '--working-dir',
        type=str,
        default=None,
        help='Working directory for the compiler process'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Seconds before a compiler process is killed (0 disables, defaults to $TESTGEN_COMPILE_TIMEOUT or 120)'
    )
    parser.add_argument(
        '--print-classpath',
        action='store_true',
        default=False,
        help='Print the resolved classpath before compiling'
    )

    # Logging
    parser.add_argument(
        '--log-dir',
        type=str,
        default=None,
        help='Directory to store log files (console only if omitted)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Set the logging level'
    )

    return parser

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments and apply them to the compiler config.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments namespace
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.sources = validate_source_files(args.sources)
    except ValueError as e:
        parser.error(str(e))

    # Command line values take precedence over the environment
    if args.java_home:
        compiler_config.set_java_home(args.java_home)
    if args.lib_paths:
        compiler_config.set_lib_paths(args.lib_paths)
    if args.junit_lib_paths:
        compiler_config.set_junit_lib_paths(args.junit_lib_paths)
    compiler_config.set_build_path(args.build_path)
    compiler_config.load_from_env()

    if args.timeout is not None:
        try:
            compiler_config.set_timeout_seconds(validate_timeout(args.timeout))
        except ValueError as e:
            parser.error(str(e))

    if args.log_dir:
        args.log_dir = Path(args.log_dir)

    return args
