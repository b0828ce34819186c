"""Unit tests for the desktop window launcher."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from vidconvert.app import WindowConfig, create_window, run
from vidconvert.commands import CommandApi
from vidconvert.convert import FFmpegLocator


class TestCreateWindow:
    """Tests for create_window()."""

    def test_binds_api(self) -> None:
        """Test the command surface is exposed as js_api."""
        api = MagicMock(spec=CommandApi)
        config = WindowConfig(url="index.html", title="Demo", width=800, height=600)

        with patch("vidconvert.app.webview") as mock_webview:
            create_window(config, api)

        args, kwargs = mock_webview.create_window.call_args
        assert args == ("Demo", "index.html")
        assert kwargs["js_api"] is api
        assert kwargs["width"] == 800
        assert kwargs["height"] == 600


class TestRun:
    """Tests for run()."""

    def test_starts_webview(self, missing_ffmpeg: FFmpegLocator) -> None:
        """Test run() creates the window and blocks in webview.start()."""
        config = WindowConfig(url="http://localhost:1420", debug=True)

        with patch("vidconvert.app.webview") as mock_webview:
            run(config, missing_ffmpeg)

        js_api = mock_webview.create_window.call_args[1]["js_api"]
        assert isinstance(js_api, CommandApi)
        assert js_api.check_ffmpeg_installed() == {"ok": True, "value": False}
        mock_webview.start.assert_called_once_with(debug=True)
