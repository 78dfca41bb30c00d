"""Tests for the command-line interface."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from themesmith import __version__
from themesmith.cli.app import app

runner = CliRunner()


class TestCli:
    """Tests for the typer commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_list(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "cave-dark" in result.output
        assert "light" in result.output

    def test_build_selected_theme(self, tmp_path):
        result = runner.invoke(app, ["build", "--output", str(tmp_path), "--theme", "cave-dark"])
        assert result.exit_code == 0
        written = tmp_path / "cave-dark.json"
        assert written.exists()
        assert json.loads(written.read_text(encoding="utf-8"))["meta"]["name"] == "cave-dark"
        assert not (tmp_path / "cave-light.json").exists()

    def test_build_output_from_environment(self, tmp_path):
        out = tmp_path / "from-env"
        result = runner.invoke(
            app, ["build", "-t", "sandcastle"], env={"THEMESMITH_OUTPUT_DIR": str(out)},
        )
        assert result.exit_code == 0
        assert (out / "sandcastle.json").exists()

    def test_build_unknown_theme(self, tmp_path):
        result = runner.invoke(app, ["build", "--output", str(tmp_path), "--theme", "nope"])
        assert result.exit_code != 0
        assert not any(tmp_path.iterdir())

    def test_ramp(self):
        result = runner.invoke(app, ["ramp", "cave-dark", "neutral", "--steps", "3"])
        assert result.exit_code == 0
        assert "#19171c" in result.output
        assert "#efecf4" in result.output

    def test_ramp_light_theme_starts_at_background(self):
        result = runner.invoke(app, ["ramp", "cave-light", "neutral", "--steps", "2"])
        assert result.exit_code == 0
        assert result.output.index("#efecf4") < result.output.index("#19171c")

    def test_ramp_missing_role(self):
        result = runner.invoke(app, ["ramp", "cave-dark", "pink"])
        assert result.exit_code == 1
        assert "pink" in result.output
