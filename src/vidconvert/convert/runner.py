"""Background execution of conversions."""

from __future__ import annotations

import contextlib
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock

from vidconvert.convert.locator import FFmpegLocator, default_locator
from vidconvert.convert.result import ConversionResult
from vidconvert.convert.transcoder import convert
from vidconvert.core import (
    DestinationBusyError,
    InvalidInputError,
    derive_output_path,
    format_error,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 2


def _destination_key(path: Path) -> Path:
    """Normalize a destination so aliases of the same file compare equal."""
    return path.expanduser().resolve(strict=False)


@dataclass
class ConversionRunner:
    """Run conversions on worker threads.

    Each submitted conversion gets a Future; the caller is never blocked
    by FFmpeg. While a conversion is writing a destination, further
    conversions into the same destination are rejected.

    Attributes:
        locator: Where to find FFmpeg.
        max_workers: Maximum number of concurrent FFmpeg processes.
    """

    locator: FFmpegLocator = field(default_factory=default_locator)
    max_workers: int = DEFAULT_MAX_WORKERS
    _executor: ThreadPoolExecutor | None = field(default=None, init=False, repr=False)
    _in_flight: set[Path] = field(default_factory=set, init=False, repr=False)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate worker count."""
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    def __enter__(self) -> ConversionRunner:
        """Enter context manager - start the executor."""
        self.start()
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: Exception | None, exc_tb: object
    ) -> None:
        """Exit context manager - wait for running conversions."""
        self.shutdown(wait=True)

    def start(self) -> None:
        """Start the worker threads. Safe to call more than once."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="vidconvert",
            )

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work and cancel conversions that have not started.

        Running FFmpeg processes are not interrupted.
        """
        if self._executor:
            self._executor.shutdown(wait=wait, cancel_futures=True)
            self._executor = None

    def is_busy(self, output_path: Path) -> bool:
        """Check whether a conversion is currently writing ``output_path``."""
        with self._lock:
            return _destination_key(output_path) in self._in_flight

    def _claim(self, key: Path) -> bool:
        with self._lock:
            if key in self._in_flight:
                return False
            self._in_flight.add(key)
            return True

    def _release(self, key: Path) -> None:
        with self._lock:
            self._in_flight.discard(key)

    def _run(
        self, input_path: str | Path, output_format: str, key: Path | None
    ) -> ConversionResult:
        try:
            return convert(input_path, output_format, self.locator)
        finally:
            if key is not None:
                self._release(key)

    def submit(
        self, input_path: str | Path, output_format: str
    ) -> Future[ConversionResult]:
        """Schedule a conversion.

        Args:
            input_path: Path to the source media file.
            output_format: Target extension, e.g. ``mp4``.

        Returns:
            Future resolving to the conversion result. A conversion into a
            destination that is already being written resolves immediately
            to a failure.

        Raises:
            RuntimeError: If the runner has not been started.
        """
        if self._executor is None:
            raise RuntimeError("ConversionRunner must be started before submitting")

        # Invalid inputs are left to convert() so its error ordering holds.
        key: Path | None = None
        with contextlib.suppress(InvalidInputError):
            key = _destination_key(derive_output_path(input_path, output_format))

        if key is not None and not self._claim(key):
            logger.debug("Rejecting conversion into busy destination %s", key)
            rejected: Future[ConversionResult] = Future()
            rejected.set_result(
                ConversionResult.failure(format_error(DestinationBusyError(str(key))))
            )
            return rejected

        try:
            future = self._executor.submit(self._run, input_path, output_format, key)
        except RuntimeError:
            if key is not None:
                self._release(key)
            raise

        if key is not None:
            claimed = key

            # Cancelled conversions never reach _run to release their claim
            def _release_if_cancelled(done: Future[ConversionResult]) -> None:
                if done.cancelled():
                    self._release(claimed)

            future.add_done_callback(_release_if_cancelled)
        return future

    def run(self, input_path: str | Path, output_format: str) -> ConversionResult:
        """Schedule a conversion and wait for its result."""
        return self.submit(input_path, output_format).result()
