"""Tests for CLI main entry point."""
from __future__ import annotations

import os
from unittest.mock import patch

from typer.testing import CliRunner

runner = CliRunner()


class TestCLIMain:
    """Tests for CLI main commands."""

    def test_version_flag(self) -> None:
        """--version shows version and exits."""
        from lazyvoids import __version__
        from lazyvoids.cli.main import app

        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"lazyvoids {__version__}" in result.stdout

    def test_help_flag(self) -> None:
        """--help lists the commands."""
        from lazyvoids.cli.main import app

        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("when", "map", "roll", "pick"):
            assert command in result.stdout

    def test_when_help(self) -> None:
        """when --help shows its options."""
        from lazyvoids.cli.main import app

        result = runner.invoke(app, ["when", "--help"])

        assert result.exit_code == 0
        assert "--case" in result.stdout
        assert "--strict" in result.stdout

    def test_verbose_flag(self) -> None:
        """--verbose is accepted before a command."""
        from lazyvoids.cli.main import app

        result = runner.invoke(app, ["--verbose", "when", "a", "-c", "a=1"])

        assert result.exit_code == 0
        assert "1" in result.stdout

    def test_invalid_log_level_does_not_break_commands(self) -> None:
        """A bad LAZYVOIDS_LOG_LEVEL is reported and logging falls back to INFO."""
        from lazyvoids.cli.main import app

        with patch.dict(os.environ, {"LAZYVOIDS_LOG_LEVEL": "chatty"}):
            result = runner.invoke(app, ["when", "a", "-c", "a=1"])

        assert result.exit_code == 0
        assert result.exception is None
        assert result.stdout.strip().splitlines()[-1] == "1"
