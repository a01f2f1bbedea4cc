"""
Platform helpers shared by the compiler components.
"""

import os
import sys


def is_windows() -> bool:
    """Return True when running on a Windows-like system."""
    return sys.platform.startswith("win") or os.name == "nt"


def classpath_separator() -> str:
    """Get the character used to join classpath entries on this platform."""
    return ";" if is_windows() else ":"
