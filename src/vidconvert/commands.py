"""Command surface exposed to the webview front-end.

An instance of :class:`CommandApi` is bound as the pywebview ``js_api``,
so the front-end calls ``window.pywebview.api.convert_video(path, "mp4")``
and receives a promise. pywebview runs each call on its own thread, and
conversions are further handed to a :class:`ConversionRunner`.

Results that can fail are returned as payload dicts::

    {"ok": True, "value": ...}
    {"ok": False, "error": "..."}
"""

from __future__ import annotations

import logging
from typing import Any

from vidconvert.convert import ConversionRunner, FFmpegLocator, probe_availability

logger = logging.getLogger(__name__)

# Front-end command name -> (method name, {front-end param: method param})
COMMANDS: dict[str, tuple[str, dict[str, str]]] = {
    "greet": ("greet", {"name": "name"}),
    "convertVideo": (
        "convert_video",
        {"inputPath": "input_path", "outputFormat": "output_format"},
    ),
    "checkFfmpegInstalled": ("check_ffmpeg_installed", {}),
}


def greeting(name: str) -> str:
    """Return the greeting shown for ``name``."""
    return f"Hello, {name}! You've been greeted from Python!"


def _ok(value: Any) -> dict[str, Any]:
    return {"ok": True, "value": value}


def _err(message: str) -> dict[str, Any]:
    return {"ok": False, "error": message}


class CommandApi:
    """Commands callable from the front-end."""

    def __init__(
        self,
        runner: ConversionRunner | None = None,
        locator: FFmpegLocator | None = None,
    ) -> None:
        """Initialize CommandApi.

        Args:
            runner: Runner executing conversions; the caller owns its
                lifecycle. A private one is created and started when
                omitted.
            locator: Where to find FFmpeg. Ignored when ``runner`` is given.
        """
        if runner is None:
            runner = ConversionRunner(locator=locator or FFmpegLocator())
            runner.start()
        # Underscored so pywebview does not expose them to JavaScript
        self._runner = runner

    def greet(self, name: str) -> str:
        """Return a greeting for ``name``."""
        return greeting(name)

    def convert_video(self, input_path: str, output_format: str) -> dict[str, Any]:
        """Convert ``input_path`` to ``output_format``.

        Returns:
            Payload carrying the output path or the failure message.
        """
        for name, value in (
            ("inputPath", input_path),
            ("outputFormat", output_format),
        ):
            if not isinstance(value, str):
                return _err(f"Parameter {name} must be a string")

        logger.debug("convert_video(%r, %r)", input_path, output_format)
        return self._runner.run(input_path, output_format).to_payload()

    def check_ffmpeg_installed(self) -> dict[str, Any]:
        """Report whether FFmpeg is available."""
        return _ok(probe_availability(self._runner.locator))

    def invoke(
        self, command: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Dispatch a command by its front-end name.

        Args:
            command: One of ``greet``, ``convertVideo``, ``checkFfmpegInstalled``.
            params: Named parameters using the front-end (camelCase) names.

        Returns:
            Payload dict. Unknown commands and bad parameters produce a
            failure payload instead of raising.
        """
        if command not in COMMANDS:
            return _err(f"Unknown command: {command}")

        method_name, param_names = COMMANDS[command]
        params = params or {}

        unexpected = sorted(set(params) - set(param_names))
        if unexpected:
            return _err(
                f"Unexpected parameter for {command}: {', '.join(unexpected)}"
            )

        kwargs: dict[str, str] = {}
        for external, internal in param_names.items():
            if external not in params:
                return _err(f"Missing parameter for {command}: {external}")
            value = params[external]
            if not isinstance(value, str):
                return _err(f"Parameter {external} must be a string")
            kwargs[internal] = value

        result = getattr(self, method_name)(**kwargs)
        if isinstance(result, dict):
            return result
        return _ok(result)
