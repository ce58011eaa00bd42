"""Diagnostic output for the apicall SDK.

Everything goes to stderr with an ``[apicall-sdk]`` prefix. Debug lines are
only written when ``APICALL_DEBUG=1``; error lines are always written.
"""

import os
import sys

PREFIX = "[apicall-sdk]"


def debug_enabled() -> bool:
    """Check whether debug output is switched on in the environment."""
    return os.environ.get("APICALL_DEBUG", "") == "1"


def log_debug(message: str) -> None:
    """Log a debug message to stderr if debug mode is enabled."""
    if debug_enabled():
        print(f"{PREFIX} {message}", file=sys.stderr)


def log_error(message: str) -> None:
    """Log an error message to stderr."""
    print(f"{PREFIX} {message}", file=sys.stderr)
