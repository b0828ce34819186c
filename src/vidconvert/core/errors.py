"""Custom exceptions and error formatting for vidconvert."""

from __future__ import annotations

FFMPEG_NOT_INSTALLED_MESSAGE = "FFmpeg is not installed. Please install FFmpeg first."


class FFmpegNotFoundError(Exception):
    """Raised when FFmpeg is not installed."""

    def __init__(self) -> None:
        """Initialize FFmpegNotFoundError."""
        super().__init__(FFMPEG_NOT_INSTALLED_MESSAGE)


class LaunchError(Exception):
    """Raised when FFmpeg exists but the process cannot be started."""

    def __init__(self, message: str) -> None:
        """Initialize LaunchError.

        Args:
            message: Description of the underlying OS error.
        """
        self.message = message
        super().__init__(f"Failed to execute FFmpeg: {message}")


class ConversionError(Exception):
    """Raised when FFmpeg exits with a failure status."""

    def __init__(self, input_path: str, message: str) -> None:
        """Initialize ConversionError.

        Args:
            input_path: Path to the input file that failed to convert.
            message: FFmpeg's diagnostic output.
        """
        self.input_path = input_path
        self.message = message
        super().__init__(f"FFmpeg conversion failed: {message}")


class InvalidInputError(Exception):
    """Raised when no safe destination path can be derived from the input."""

    def __init__(self, input_path: str, message: str) -> None:
        """Initialize InvalidInputError.

        Args:
            input_path: The offending input path.
            message: Why the input was rejected.
        """
        self.input_path = input_path
        self.message = message
        super().__init__(f"Invalid input {input_path}: {message}")


class DestinationBusyError(Exception):
    """Raised when another conversion is already writing the same file."""

    def __init__(self, output_path: str) -> None:
        """Initialize DestinationBusyError.

        Args:
            output_path: The destination already claimed by a running conversion.
        """
        self.output_path = output_path
        super().__init__(f"A conversion into {output_path} is already running")


def format_error(error: Exception) -> str:
    """Format error for user display.

    Args:
        error: The exception to format.

    Returns:
        Human-readable error message.
    """
    if isinstance(
        error,
        (
            FFmpegNotFoundError,
            LaunchError,
            ConversionError,
            InvalidInputError,
        ),
    ):
        return str(error)

    if isinstance(error, DestinationBusyError):
        return f"{error}. Wait for it to finish and retry."

    return f"Unexpected error: {error}"
