"""Tests for the get CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from envguard.cli import cli


@pytest.mark.usefixtures("_clean_environ")
class TestGetCommand:
    def test_default_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "get", "LOG_LEVEL"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["value"] == "debug"
        assert data["origin"] == "default"

    def test_coerced_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "get", "PORT"], env={"PORT": "8080"})
        assert json.loads(result.output)["data"]["value"] == 8080

    def test_quiet_prints_bare_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "get", "FEATURE_FLIPPING"], env={"FEATURE_FLIPPING": "YES"}
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "true"

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["get", "FEATURE_FLIPPING"], env={"FEATURE_FLIPPING": "maybe"}
        )
        assert result.exit_code == 1
        assert "FEATURE_FLIPPING is not valid" in result.stderr

    def test_unset_without_require(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["get", "DATABASE_URL"])
        assert result.exit_code == 0
        assert "origin: unset" in result.output

    def test_unset_with_require(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "get", "DATABASE_URL", "--require"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "MISSING_CONFIGURATION"

    def test_quiet_prints_secret_for_capture(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "get", "DATABASE_URL"], env={"DATABASE_URL": "postgres://db/app"}
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "postgres://db/app"

    def test_verbose_shows_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "get", "PORT"], env={"PORT": "1"})
        assert result.exit_code == 0
        assert "type: number" in result.stdout
