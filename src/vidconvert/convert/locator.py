"""Resolution of the FFmpeg executable."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_EXECUTABLE = "ffmpeg"


@dataclass(frozen=True)
class FFmpegLocator:
    """Find the FFmpeg executable to run.

    Attributes:
        executable: Bare command name or full path. Defaults to ``ffmpeg``
            looked up on PATH.
        resolver: Function mapping a name or path to an absolute executable
            path, or None when nothing runnable exists there. Defaults to
            :func:`shutil.which`.
    """

    executable: str | None = None
    resolver: Callable[[str], str | None] | None = field(default=None, repr=False)

    @property
    def name(self) -> str:
        """The command name or path being looked up."""
        return self.executable or DEFAULT_EXECUTABLE

    def resolve(self) -> str | None:
        """Resolve the executable.

        Returns:
            Path to a runnable FFmpeg, or None if it cannot be found.
        """
        resolver = self.resolver or shutil.which
        return resolver(self.name)


def default_locator() -> FFmpegLocator:
    """Locator that finds ``ffmpeg`` on PATH."""
    return FFmpegLocator()
