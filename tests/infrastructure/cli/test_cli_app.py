"""Smoke tests for the np-enhancer CLI."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from np_enhancer.domain.entities import Track, TrackArtist, TrackRelease
from np_enhancer.domain.exceptions import ListenSourceError
from np_enhancer.infrastructure.cli.app import app

MATCHED = Track(
    name="Hit Song",
    mbid="abc-123",
    matched=True,
    release=TrackRelease(name="Greatest Hits", mbid="rel-1"),
    artists=[TrackArtist(name="The Band", mbid="artist-1", join_phrase=" · ")],
)


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


class TestCommandStructure:
    """Core commands exist and are reachable."""

    def test_main_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "now-playing" in result.stdout
        assert "serve" in result.stdout
        assert "version" in result.stdout

    def test_version_command_works(self, runner):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "np-enhancer" in result.stdout


class TestNowPlayingCommand:
    """now-playing renders whatever the resolver returns."""

    def test_json_output(self, runner):
        with patch(
            "np_enhancer.infrastructure.cli.app.get_current_track",
            new=AsyncMock(return_value=MATCHED),
        ) as resolver:
            result = runner.invoke(app, ["now-playing", "rob", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == MATCHED.to_dict()
        assert resolver.await_args.args[0] == "rob"

    def test_panel_output(self, runner):
        with patch(
            "np_enhancer.infrastructure.cli.app.get_current_track",
            new=AsyncMock(return_value=Track.unmatched("Unknown", "Nobody")),
        ):
            result = runner.invoke(app, ["now-playing", "rob"])

        assert result.exit_code == 0
        assert "Unknown" in result.stdout
        assert "unmatched" in result.stdout

    def test_listen_source_failure_exits_non_zero(self, runner):
        with patch(
            "np_enhancer.infrastructure.cli.app.get_current_track",
            new=AsyncMock(side_effect=ListenSourceError("down", status_code=500)),
        ):
            result = runner.invoke(app, ["now-playing", "rob"])

        assert result.exit_code == 1
        assert "Error during now playing" in result.stdout
