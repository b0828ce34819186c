"""Convert feature - handles FFmpeg interaction for video conversion."""

from vidconvert.convert.locator import FFmpegLocator, default_locator
from vidconvert.convert.result import ConversionRequest, ConversionResult
from vidconvert.convert.runner import ConversionRunner
from vidconvert.convert.transcoder import (
    build_ffmpeg_command,
    convert,
    probe_availability,
    transcode,
)

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "ConversionRunner",
    "FFmpegLocator",
    "build_ffmpeg_command",
    "convert",
    "default_locator",
    "probe_availability",
    "transcode",
]
