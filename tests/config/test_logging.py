"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from envguard.config.logging import configure_logging, level_for


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("envguard").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("envguard").level == logging.WARNING

    def test_explicit_level_wins(self) -> None:
        configure_logging(verbose=True, level="error")
        assert logging.getLogger("envguard").level == logging.ERROR

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("envguard.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "envguard.test"
        assert "timestamp" in parsed

    def test_rejections_logged_without_value(self, capfd: pytest.CaptureFixture[str]) -> None:
        from envguard.schema.defaults import default_registry
        from envguard.services.validator import Validator

        configure_logging(verbose=True, log_json=True)
        Validator(default_registry()).validate("ADMIN_CLIENT_SECRET", "")
        Validator(default_registry()).validate("PORT", "hunter2")
        err = capfd.readouterr().err
        lines = [json.loads(line) for line in err.strip().splitlines()]
        assert [line["logger"] for line in lines] == ["envguard.services.validator"] * 2
        assert "PORT" in lines[1]["event"]
        assert "hunter2" not in err

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestLevelFor:
    @pytest.mark.parametrize(
        ("name", "level"),
        [
            ("fatal", logging.CRITICAL),
            ("error", logging.ERROR),
            ("warn", logging.WARNING),
            ("info", logging.INFO),
            ("debug", logging.DEBUG),
            ("trace", logging.DEBUG),
            ("INFO", logging.INFO),
        ],
    )
    def test_mapping(self, name: str, level: int) -> None:
        assert level_for(name) == level

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            level_for("verbose")
