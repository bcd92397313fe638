"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from csquares.cli import app


@pytest.fixture
def runner() -> CliRunner:
    """Fixture for the CLI runner."""
    return CliRunner()


class TestEncodeCommand:
    """Tests for `csquares encode`."""

    def test_encode(self, runner: CliRunner) -> None:
        """Test encoding a southern point."""
        result = runner.invoke(app, ["encode", "--decimals", "0", "--", "-42", "147"])
        assert result.exit_code == 0
        assert "3414:227" in result.output
        assert "center:" in result.output

    def test_encode_json(self, runner: CliRunner) -> None:
        """Test the JSON summary output."""
        result = runner.invoke(app, ["encode", "-d", "1", "--json", "--", "-42.8", "147.3"])
        assert result.exit_code == 0
        summary = json.loads(result.output)
        assert summary["identifier"] == "3414:227:383"
        assert summary["center_latitude"] == pytest.approx(-42.85)

    def test_encode_too_deep(self, runner: CliRunner) -> None:
        """Test that an exhausted ladder exits with an error."""
        result = runner.invoke(app, ["encode", "-d", "5", "10", "10"])
        assert result.exit_code == 1
        assert "finer" in result.output


    def test_encode_far_too_deep(self, runner: CliRunner) -> None:
        """Test that a precision far past the ladder exits cleanly."""
        result = runner.invoke(app, ["encode", "-d", "30", "10", "10"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)


class TestOtherCommands:
    """Tests for decode, distance and demo."""

    def test_decode(self, runner: CliRunner) -> None:
        """Test describing an identifier."""
        result = runner.invoke(app, ["decode", "3414:2"])
        assert result.exit_code == 0
        assert "resolution: 5°" in result.output

    def test_decode_invalid(self, runner: CliRunner) -> None:
        """Test that a malformed identifier exits with an error."""
        result = runner.invoke(app, ["decode", "9999"])
        assert result.exit_code == 1
        assert "Invalid C-squares identifier" in result.output

    def test_distance(self, runner: CliRunner) -> None:
        """Test the distance between two points on the equator."""
        result = runner.invoke(app, ["distance", "0", "0", "0", "1"])
        assert result.exit_code == 0
        assert result.output.startswith("111.19")

    def test_demo(self, runner: CliRunner) -> None:
        """Test the sample point printout."""
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "3414:227:383" in result.output
