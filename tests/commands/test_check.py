"""Tests for the check CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from envguard.cli import cli


@pytest.mark.usefixtures("_clean_environ")
class TestCheckCommand:
    def test_clean_environment_passes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "7 keys checked" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["healthy"] is True
        assert data["data"]["count"] == 7

    def test_invalid_value_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check"], env={"PORT": "abc"})
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "CONFIG_UNHEALTHY"
        assert payload["error"]["detail"]["issues"][0]["key"] == "PORT"

    def test_human_failure_names_key(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"], env={"FEATURE_FLIPPING": "maybe"})
        assert result.exit_code == 1
        assert "FEATURE_FLIPPING is not valid" in result.stderr

    def test_require_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--require", "DATABASE_URL"])
        assert result.exit_code == 1
        assert "DATABASE_URL is not set" in result.stderr

    def test_require_present(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["check", "--require", "DATABASE_URL"],
            env={"DATABASE_URL": "postgres://db/app"},
        )
        assert result.exit_code == 0

    def test_require_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "--require-all", "PORT", "LOG_LEVEL"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        issues = payload["error"]["detail"]["issues"]
        assert [(i["key"], i["status"]) for i in issues] == [("PORT", "missing")]

    def test_named_keys_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "PORT"], env={"LOG_LEVEL": "loud"})
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["count"] == 1

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--examples"])
        assert result.exit_code == 0
        assert "envguard check --require-all" in result.output
