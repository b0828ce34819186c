"""Desktop window hosting the front-end."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import webview

from vidconvert.commands import CommandApi
from vidconvert.convert import ConversionRunner, FFmpegLocator

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "vidconvert"


@dataclass(frozen=True)
class WindowConfig:
    """Settings for the application window.

    Attributes:
        url: Front-end entry point (http URL or local HTML file).
        title: Window title.
        width: Initial width in pixels.
        height: Initial height in pixels.
        debug: Enable the webview developer tools.
    """

    url: str
    title: str = DEFAULT_TITLE
    width: int = 1000
    height: int = 700
    debug: bool = False


def create_window(config: WindowConfig, api: CommandApi) -> webview.Window:
    """Create the main window with ``api`` exposed to JavaScript."""
    return webview.create_window(
        config.title,
        config.url,
        js_api=api,
        width=config.width,
        height=config.height,
        resizable=True,
        min_size=(640, 480),
    )


def run(config: WindowConfig, locator: FFmpegLocator | None = None) -> None:
    """Open the window and block until it is closed.

    Conversions still queued when the window closes are cancelled;
    a running FFmpeg process is waited for.
    """
    with ConversionRunner(locator=locator or FFmpegLocator()) as runner:
        api = CommandApi(runner=runner)
        create_window(config, api)
        logger.debug("Starting webview at %s", config.url)
        webview.start(debug=config.debug)
