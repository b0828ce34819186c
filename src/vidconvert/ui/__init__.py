"""UI feature - Rich console output and logging."""

from vidconvert.ui.progress import (
    configure_logging,
    console,
    create_conversion_progress,
    print_error,
    print_success,
)

__all__ = [
    "configure_logging",
    "console",
    "create_conversion_progress",
    "print_error",
    "print_success",
]
