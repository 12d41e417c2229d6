"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from envguard.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success(self) -> None:
        result = ServiceResult.success("get", {"key": "PORT"})
        assert result.ok is True
        assert result.data == {"key": "PORT"}
        assert result.warnings == []
        assert result.error is None

    def test_failure(self) -> None:
        result = ServiceResult.failure("get", "INVALID_CONFIGURATION", "PORT is not valid")
        assert result.ok is False
        assert result.error == ServiceError(
            code="INVALID_CONFIGURATION", message="PORT is not valid"
        )
        assert result.data == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult.success("check", {"healthy": True}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "check"
        assert parsed["data"]["healthy"] is True
        assert parsed["warnings"] == ["w"]

    def test_frozen(self) -> None:
        result = ServiceResult.success("check", {})
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
