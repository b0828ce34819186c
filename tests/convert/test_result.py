"""Unit tests for conversion request/result value types."""

from __future__ import annotations

from pathlib import Path

import pytest

from vidconvert.convert import ConversionRequest, ConversionResult


class TestConversionRequest:
    """Tests for ConversionRequest."""

    def test_of_converts_path(self) -> None:
        """Test string paths from the front-end become Path objects."""
        request = ConversionRequest.of("/videos/clip.webm", "mp4")
        assert request.input_path == Path("/videos/clip.webm")
        assert request.output_format == "mp4"

    def test_immutable(self) -> None:
        """Test requests cannot be modified."""
        request = ConversionRequest.of("clip.webm", "mp4")
        with pytest.raises(AttributeError):
            request.output_format = "mkv"  # type: ignore[misc]


class TestConversionResult:
    """Tests for ConversionResult."""

    def test_ok(self) -> None:
        """Test a successful result."""
        result = ConversionResult.ok(Path("clip.mp4"))
        assert result.success is True
        assert result.error is None
        assert result.to_payload() == {"ok": True, "value": "clip.mp4"}

    def test_failure(self) -> None:
        """Test a failed result."""
        result = ConversionResult.failure("FFmpeg conversion failed: bad")
        assert result.success is False
        assert result.output_path is None
        assert result.to_payload() == {
            "ok": False,
            "error": "FFmpeg conversion failed: bad",
        }

    def test_requires_exactly_one_variant(self) -> None:
        """Test a result cannot be both or neither."""
        with pytest.raises(ValueError):
            ConversionResult()
        with pytest.raises(ValueError):
            ConversionResult(output_path=Path("a.mp4"), error="boom")
