"""Core utilities - errors and destination path handling."""

from vidconvert.core.errors import (
    FFMPEG_NOT_INSTALLED_MESSAGE,
    ConversionError,
    DestinationBusyError,
    FFmpegNotFoundError,
    InvalidInputError,
    LaunchError,
    format_error,
)
from vidconvert.core.paths import derive_output_path, normalize_format

__all__ = [
    "FFMPEG_NOT_INSTALLED_MESSAGE",
    "ConversionError",
    "DestinationBusyError",
    "FFmpegNotFoundError",
    "InvalidInputError",
    "LaunchError",
    "derive_output_path",
    "format_error",
    "normalize_format",
]
