"""Utility modules for findr.

This module exports commonly used utility functions.
"""

from findr.utils.formatting import (
    console,
    err_console,
    print_error,
    print_path,
    print_walk_error,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_path",
    "print_walk_error",
]
