"""Smoke tests for the CLI - high value, low maintenance."""

import json

import pytest
from typer.testing import CliRunner

from animatch.infrastructure.cli.app import app


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


class TestCommandStructure:
    """Test that the command structure exists and is accessible."""

    def test_main_help_lists_commands(self, runner):
        """Ensure main help shows every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("match", "normalize", "score", "thresholds", "version"):
            assert command in result.stdout

    def test_version_command(self, runner):
        """Ensure version command is accessible."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "Animatch" in result.stdout


class TestMatchCommand:
    """Test the match command end to end."""

    def test_json_output(self, runner, catalog_file):
        """Ensure a match is printed as JSON."""
        result = runner.invoke(
            app,
            [
                "match",
                "Attack on Titan",
                "--catalog",
                str(catalog_file),
                "--year",
                "2013",
                "--episodes",
                "25",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["method"] == "exact_year_episode_raw"
        assert data["result"]["id"] == 1

    def test_table_output(self, runner, catalog_file):
        """Ensure the default table output names the method."""
        result = runner.invoke(
            app, ["match", "Shingeki no Kyojinn", "--catalog", str(catalog_file)]
        )

        assert result.exit_code == 0
        assert "loose" in result.stdout

    def test_no_match_exits_with_one(self, runner, catalog_file):
        """Ensure an unmatched title exits with code 1."""
        result = runner.invoke(
            app, ["match", "Zzz", "--catalog", str(catalog_file), "--format", "json"]
        )

        assert result.exit_code == 1
        assert result.stdout.strip() == "null"

    def test_missing_catalog_is_reported(self, runner, tmp_path):
        """Ensure catalog errors become a clean exit code."""
        result = runner.invoke(
            app, ["match", "One Piece", "--catalog", str(tmp_path / "nope.json")]
        )

        assert result.exit_code == 1
        assert "Error during match command" in result.stdout


class TestUtilityCommands:
    """Test normalize and score."""

    def test_normalize_shows_both_forms(self, runner):
        """Ensure both normalization depths are printed."""
        result = runner.invoke(app, ["normalize", "Naruto 2nd Season"])

        assert result.exit_code == 0
        assert "Naruto 2nd Season" in result.stdout
        assert "naruto 2" in result.stdout

    def test_score_sanitizes_by_default(self, runner):
        """Ensure titles differing only by noise score 1.0."""
        result = runner.invoke(app, ["score", "Naruto Season 2", "Naruto 2nd Season"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "1.0000"

    def test_score_raw(self, runner):
        """Ensure --raw compares titles as given."""
        result = runner.invoke(app, ["score", "MARTHA", "MARHTA", "--raw"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "0.9611"
