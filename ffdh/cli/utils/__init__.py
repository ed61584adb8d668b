"""CLI utility functions"""

from .output import (
    console,
    print_banner,
    format_selection,
    format_outcome,
    format_failure,
    print_error,
)

__all__ = [
    'console',
    'print_banner',
    'format_selection',
    'format_outcome',
    'format_failure',
    'print_error',
]
