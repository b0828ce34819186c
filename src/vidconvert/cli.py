"""CLI implementation for vidconvert."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from vidconvert import __version__
from vidconvert.commands import greeting
from vidconvert.convert import FFmpegLocator, convert, probe_availability
from vidconvert.core import FFmpegNotFoundError, format_error
from vidconvert.ui import (
    configure_logging,
    create_conversion_progress,
    print_error,
    print_success,
)

DEFAULT_FORMAT = "mp4"

# Create Typer app
app = typer.Typer(
    name="vidconvert",
    help="Convert video files with FFmpeg, from the terminal or a desktop window.",
    add_completion=False,
    no_args_is_help=True,
)

FFmpegOption = Annotated[
    str | None,
    typer.Option(
        "--ffmpeg",
        help="FFmpeg executable name or path (default: ffmpeg on PATH).",
        show_default=False,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print(f"vidconvert version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show debug logging."),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Convert video files with FFmpeg."""
    configure_logging(verbose)


@app.command("convert")
def convert_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="Video file to convert.", show_default=False),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Target extension; FFmpeg picks the container from it.",
        ),
    ] = DEFAULT_FORMAT,
    ffmpeg: FFmpegOption = None,
) -> None:
    """Convert a video next to the original, replacing its extension."""
    locator = FFmpegLocator(ffmpeg)
    if not probe_availability(locator):
        print_error(format_error(FFmpegNotFoundError()))
        raise typer.Exit(code=2)

    with create_conversion_progress() as progress:
        progress.add_task(f"Converting {input_path.name}...", total=None)
        result = convert(input_path, output_format, locator)

    if result.output_path is None:
        print_error(result.error or "Unknown error")
        raise typer.Exit(code=1)

    print_success(f"Saved: {result.output_path}")


@app.command("check")
def check_command(ffmpeg: FFmpegOption = None) -> None:
    """Check whether FFmpeg is installed."""
    if not probe_availability(FFmpegLocator(ffmpeg)):
        print_error(format_error(FFmpegNotFoundError()))
        raise typer.Exit(code=2)
    print_success("FFmpeg is installed")


@app.command("greet")
def greet_command(
    name: Annotated[str, typer.Argument(help="Who to greet.")],
) -> None:
    """Print a greeting."""
    print(greeting(name))


@app.command("gui")
def gui_command(
    url: Annotated[
        str,
        typer.Option("--url", help="Front-end entry point: http URL or HTML file."),
    ],
    title: Annotated[str, typer.Option("--title", help="Window title.")] = "vidconvert",
    width: Annotated[int, typer.Option("--width", min=320)] = 1000,
    height: Annotated[int, typer.Option("--height", min=240)] = 700,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable webview developer tools."),
    ] = False,
    ffmpeg: FFmpegOption = None,
) -> None:
    """Open the desktop window."""
    # Imported here so terminal commands never load the webview backend
    from vidconvert import app as desktop

    config = desktop.WindowConfig(
        url=url, title=title, width=width, height=height, debug=debug
    )
    desktop.run(config, FFmpegLocator(ffmpeg))


if __name__ == "__main__":
    app()
