"""FFmpeg wrapper for video conversion."""

from __future__ import annotations

import logging
import subprocess  # nosec B404
from pathlib import Path

from vidconvert.convert.locator import FFmpegLocator, default_locator
from vidconvert.convert.result import ConversionRequest, ConversionResult
from vidconvert.core import (
    ConversionError,
    FFmpegNotFoundError,
    InvalidInputError,
    LaunchError,
    derive_output_path,
    format_error,
)

logger = logging.getLogger(__name__)

# Fixed encoding parameters: H.264 video, AAC audio
VIDEO_CODEC = "libx264"
PRESET = "medium"
CRF = "23"
AUDIO_CODEC = "aac"
AUDIO_BITRATE = "192k"


def _run_version_query(executable: str) -> bool:
    """Run ``<executable> -version`` and report whether it exited cleanly."""
    try:
        result = subprocess.run(  # nosec B603
            [executable, "-version"],
            capture_output=True,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("FFmpeg probe could not launch %s: %s", executable, e)
        return False

    logger.debug("FFmpeg probe %s exited with %s", executable, result.returncode)
    return result.returncode == 0


def probe_availability(locator: FFmpegLocator | None = None) -> bool:
    """Check whether FFmpeg is installed and runnable.

    Missing executables, launch failures and non-zero exits all count as
    unavailable.

    Args:
        locator: Where to find FFmpeg. Defaults to ``ffmpeg`` on PATH.

    Returns:
        True if ``ffmpeg -version`` launches and exits successfully.
    """
    locator = locator or default_locator()
    executable = locator.resolve()
    if executable is None:
        logger.debug("FFmpeg executable %r not found", locator.name)
        return False
    return _run_version_query(executable)


def build_ffmpeg_command(
    executable: str, input_path: Path, output_path: Path
) -> list[str]:
    """Build the FFmpeg command line for a conversion.

    The output container is chosen by FFmpeg from the output extension.
    """
    return [
        executable,
        "-i",
        str(input_path),
        "-c:v",
        VIDEO_CODEC,
        "-preset",
        PRESET,
        "-crf",
        CRF,
        "-c:a",
        AUDIO_CODEC,
        "-b:a",
        AUDIO_BITRATE,
        "-y",
        str(output_path),
    ]


def transcode(
    request: ConversionRequest,
    locator: FFmpegLocator | None = None,
) -> Path:
    """Convert a video file via FFmpeg.

    Blocks until FFmpeg exits. An existing file at the destination is
    overwritten.

    Args:
        request: The file to convert and the target format.
        locator: Where to find FFmpeg. Defaults to ``ffmpeg`` on PATH.

    Returns:
        Path of the converted file.

    Raises:
        FFmpegNotFoundError: If FFmpeg is not installed.
        InvalidInputError: If no safe destination can be derived.
        LaunchError: If FFmpeg could not be started.
        ConversionError: If FFmpeg exits with a failure status.
    """
    locator = locator or default_locator()
    executable = locator.resolve()
    # Same rule as probe_availability: a failing -version counts as missing
    if executable is None or not _run_version_query(executable):
        raise FFmpegNotFoundError

    output_path = derive_output_path(request.input_path, request.output_format)
    cmd = build_ffmpeg_command(executable, request.input_path, output_path)
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(  # nosec B603
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as e:
        raise FFmpegNotFoundError from e
    except OSError as e:
        raise LaunchError(str(e)) from e
    except subprocess.SubprocessError as e:
        raise LaunchError(str(e)) from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        logger.debug("FFmpeg exited with %s", result.returncode)
        raise ConversionError(str(request.input_path), stderr or "Unknown error")

    logger.debug("Converted %s -> %s", request.input_path, output_path)
    return output_path


def convert(
    input_path: str | Path,
    output_format: str,
    locator: FFmpegLocator | None = None,
) -> ConversionResult:
    """Convert a video file and report the outcome as a value.

    Args:
        input_path: Path to the source media file.
        output_format: Target extension, e.g. ``mp4``.
        locator: Where to find FFmpeg. Defaults to ``ffmpeg`` on PATH.

    Returns:
        A successful result carrying the output path, or a failed result
        carrying a human-readable message. Never raises for conversion
        failures.
    """
    request = ConversionRequest.of(input_path, output_format)
    try:
        return ConversionResult.ok(transcode(request, locator))
    except (
        FFmpegNotFoundError,
        InvalidInputError,
        LaunchError,
        ConversionError,
    ) as e:
        return ConversionResult.failure(format_error(e))
