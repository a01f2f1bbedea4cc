import re

_ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def strip_ansi_codes(text: str) -> str:
    """
    Remove ANSI color codes from compiler output.

    Args:
        text: Text that may contain ANSI color codes

    Returns:
        Text with ANSI color codes removed
    """
    return _ANSI_PATTERN.sub('', text)


def _count(text: str, kind: str) -> int:
    if not text:
        return 0

    text = strip_ansi_codes(text)

    # javac ends its output with "N errors" / "1 warning"
    match = re.search(rf'^\s*(\d+)\s+{kind}s?\s*$', text, re.MULTILINE | re.IGNORECASE)
    if match:
        return int(match.group(1))

    return len([line for line in text.split('\n') if f': {kind}:' in line.lower()])


def count_errors(text: str) -> int:
    """Count the compilation errors reported in compiler output."""
    return _count(text, 'error')


def count_warnings(text: str) -> int:
    """Count the warnings reported in compiler output."""
    return _count(text, 'warning')
