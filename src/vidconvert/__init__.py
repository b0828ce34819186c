"""Desktop shell for converting video files with FFmpeg."""

from vidconvert.core import (
    ConversionError,
    DestinationBusyError,
    FFmpegNotFoundError,
    InvalidInputError,
    LaunchError,
)

__version__ = "0.1.0"
__metadata__ = {
    "name": "vidconvert",
    "version": __version__,
    "license": "MIT",
    "python": ">=3.12",
}
__all__ = [
    "ConversionError",
    "DestinationBusyError",
    "FFmpegNotFoundError",
    "InvalidInputError",
    "LaunchError",
    "__metadata__",
    "__version__",
]
