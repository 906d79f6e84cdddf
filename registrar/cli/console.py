"""
Console output helpers shared by the shell and the entry point.
"""

import sys

from ..services.registry import OperationResult


def _console_supports_utf8() -> bool:
    try:
        enc = getattr(sys.stdout, "encoding", None)
        return enc is not None and "utf" in enc.lower()
    except Exception:
        return False


OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"


def print_result(result: OperationResult, marks: bool = False) -> None:
    """Print the message of an operation result, optionally with a status mark."""
    if marks:
        print(f"{OK_CHAR if result.success else FAIL_CHAR} {result.message}")
    else:
        print(result.message)
