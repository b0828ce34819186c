"""Rich console output for vidconvert."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

# Global console instance for consistent output
console = Console()

_TASK_DESCRIPTION_FORMAT = "[bold blue]{task.description}"


def create_conversion_progress() -> Progress:
    """Create Rich progress display shown while FFmpeg runs.

    FFmpeg is run without progress reporting, so this is a spinner with
    the elapsed time rather than a bar.

    Returns:
        Configured Progress instance for conversion operations.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn(_TASK_DESCRIPTION_FORMAT),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def configure_logging(verbose: bool) -> None:
    """Route vidconvert log records to the console.

    Args:
        verbose: Show debug records when True, warnings and above otherwise.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("vidconvert")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: The message to print.
    """
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message.

    Args:
        message: The message to print.
    """
    console.print(f"[red]✗[/red] {message}", style="red")
