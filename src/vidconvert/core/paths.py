"""Destination path derivation for conversions."""

from __future__ import annotations

import re
from pathlib import Path

from vidconvert.core.errors import InvalidInputError

# Extensions are a bare run of letters/digits (mp4, mkv, 3gp, webm ...)
_FORMAT_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


def normalize_format(output_format: str) -> str:
    """Normalize a user-supplied output format.

    Surrounding whitespace and a single leading dot are dropped, so ".mp4",
    "mp4" and " mp4 " are equivalent. Case is preserved.

    Args:
        output_format: Requested target extension.

    Returns:
        The bare extension.

    Raises:
        ValueError: If the format is empty or not a plain extension.
    """
    value = output_format.strip()
    if value.startswith("."):
        value = value[1:]
    if not value:
        raise ValueError("output format is empty")
    if not _FORMAT_PATTERN.match(value):
        raise ValueError(f"'{output_format}' is not a valid file extension")
    return value


def derive_output_path(input_path: str | Path, output_format: str) -> Path:
    """Compute where a conversion writes its output.

    The input's own extension is replaced by the requested one and the file
    stays in the input's directory: ``clip.webm`` + ``mp4`` -> ``clip.mp4``.

    Args:
        input_path: Path to the source media file.
        output_format: Requested target extension.

    Returns:
        The destination path.

    Raises:
        InvalidInputError: If the input has no extension, the format is
            invalid, or the destination would be the source file itself.
    """
    path = Path(input_path)

    try:
        extension = normalize_format(output_format)
    except ValueError as e:
        raise InvalidInputError(str(input_path), str(e)) from e

    if not path.suffix or not path.stem:
        raise InvalidInputError(
            str(input_path), "input file has no extension to replace"
        )

    if path.suffix.lower() == f".{extension.lower()}":
        raise InvalidInputError(
            str(input_path),
            f"input is already a .{extension} file; converting would overwrite it",
        )

    return path.with_suffix(f".{extension}")
