"""
Terminal output for the compile command.
"""

import sys

from compilation.models import CompilationResult


class Colors:
    """ANSI color codes for terminal output."""
    BRIGHT_RED = '\033[1;91m'
    BRIGHT_GREEN = '\033[1;92m'
    BRIGHT_YELLOW = '\033[1;93m'
    BRIGHT_BLUE = '\033[1;94m'
    DIM = '\033[2m'
    RESET = '\033[0m'

def colorize(text: str, color: str) -> str:
    """Apply color to text, unless stdout is not a terminal."""
    if not sys.stdout.isatty():
        return text
    return f"{color}{text}{Colors.RESET}"

def print_step(text: str):
    """Print a step line."""
    print(colorize(f"[STEP] {text}", Colors.BRIGHT_BLUE))

def print_success(message: str):
    """Print a success message with checkmark."""
    print(colorize(f"   ✓ {message}", Colors.BRIGHT_GREEN))

def print_warning(message: str):
    """Print a warning message."""
    print(colorize(f"   ⚠️ {message}", Colors.BRIGHT_YELLOW))

def print_error(message: str):
    """Print an error message."""
    print(colorize(f"   ❌ {message}", Colors.BRIGHT_RED))

def print_result(result: CompilationResult):
    """Print the verdict for one file, with its diagnostics when it failed."""
    if result.success:
        print_success(f"{result.source_path} compiled")
        return

    if result.outcome == "launch_failure":
        print_error(f"{result.source_path}: compiler could not be started")
    elif result.outcome == "timed_out":
        print_error(f"{result.source_path}: compiler timed out")
    elif result.error_count == 0 and result.warning_count > 0:
        print_warning(f"{result.source_path}: rejected because of {result.warning_count} warning(s)")
    else:
        print_error(f"{result.source_path}: {result.error_count} error(s)")

    for line in result.diagnostics.strip().splitlines():
        print(colorize(f"      {line}", Colors.DIM))

def print_summary(compiled: int, total: int):
    """Print the final count of compiled files."""
    message = f"{compiled}/{total} file(s) compiled"
    if compiled == total:
        print_success(message)
    else:
        print_error(message)
