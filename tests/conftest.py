"""Shared pytest fixtures for vidconvert tests."""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from vidconvert.convert import FFmpegLocator

if TYPE_CHECKING:
    from collections.abc import Generator

# Stand-in for ffmpeg: answers -version, fails on a missing input,
# otherwise copies the input (2nd argument) to the output (last argument).
FAKE_FFMPEG_SCRIPT = """#!/bin/sh
if [ "$1" = "-version" ]; then
    echo "ffmpeg version 0.0-fake"
    exit 0
fi
if [ ! -f "$2" ]; then
    echo "$2: No such file or directory" >&2
    exit 1
fi
for last; do :; done
cp "$2" "$last"
"""

GARBLED_FFMPEG_SCRIPT = """#!/bin/sh
if [ "$1" = "-version" ]; then
    exit 0
fi
printf 'bad \\377\\376 bytes\\n' >&2
exit 1
"""

BROKEN_FFMPEG_SCRIPT = """#!/bin/sh
echo "broken install" >&2
exit 1
"""


def _write_executable(path: Path, content: str) -> Path:
    if sys.platform == "win32":
        pytest.skip("fake ffmpeg is a POSIX shell script")
    path.write_text(content)
    path.chmod(0o755)
    return path


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_ffmpeg(temp_dir: Path) -> FFmpegLocator:
    """Locator pointing at a working fake ffmpeg script."""
    bin_dir = temp_dir / "bin"
    bin_dir.mkdir()
    script = _write_executable(bin_dir / "ffmpeg", FAKE_FFMPEG_SCRIPT)
    return FFmpegLocator(str(script))


@pytest.fixture
def broken_ffmpeg(temp_dir: Path) -> FFmpegLocator:
    """Locator pointing at an ffmpeg that fails every invocation."""
    bin_dir = temp_dir / "bin"
    bin_dir.mkdir()
    script = _write_executable(bin_dir / "ffmpeg", BROKEN_FFMPEG_SCRIPT)
    return FFmpegLocator(str(script))


@pytest.fixture
def garbled_ffmpeg(temp_dir: Path) -> FFmpegLocator:
    """Locator pointing at an ffmpeg that fails with non-UTF-8 stderr."""
    bin_dir = temp_dir / "bin"
    bin_dir.mkdir()
    script = _write_executable(bin_dir / "ffmpeg", GARBLED_FFMPEG_SCRIPT)
    return FFmpegLocator(str(script))


@pytest.fixture
def missing_ffmpeg() -> FFmpegLocator:
    """Locator that never finds ffmpeg."""
    return FFmpegLocator(resolver=lambda _name: None)


@pytest.fixture
def mock_subprocess_success() -> MagicMock:
    """Mock subprocess.run for successful command execution."""
    mock = MagicMock()
    mock.returncode = 0
    mock.stdout = ""
    mock.stderr = ""
    return mock


@pytest.fixture
def mock_subprocess_failure() -> MagicMock:
    """Mock subprocess.run for failed command execution."""
    mock = MagicMock()
    mock.returncode = 1
    mock.stdout = ""
    mock.stderr = "Error: Command failed"
    return mock
