"""Conversion request and result value types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ConversionRequest:
    """A single conversion to perform.

    Attributes:
        input_path: Path to the source media file.
        output_format: Target extension, e.g. ``mp4``.
    """

    input_path: Path
    output_format: str

    @classmethod
    def of(cls, input_path: str | Path, output_format: str) -> ConversionRequest:
        """Build a request from front-end strings."""
        return cls(input_path=Path(input_path), output_format=output_format)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a conversion.

    Exactly one of ``output_path`` and ``error`` is set.

    Attributes:
        output_path: Where the converted file was written, on success.
        error: Human-readable diagnostic, on failure.
    """

    output_path: Path | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate that the result is either a success or a failure."""
        if (self.output_path is None) == (self.error is None):
            raise ValueError("ConversionResult needs exactly one of output_path/error")

    @classmethod
    def ok(cls, output_path: Path) -> ConversionResult:
        """Successful conversion into ``output_path``."""
        return cls(output_path=output_path)

    @classmethod
    def failure(cls, error: str) -> ConversionResult:
        """Failed conversion described by ``error``."""
        return cls(error=error)

    @property
    def success(self) -> bool:
        """Whether the conversion succeeded."""
        return self.output_path is not None

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the front-end."""
        if self.output_path is not None:
            return {"ok": True, "value": str(self.output_path)}
        return {"ok": False, "error": self.error}
