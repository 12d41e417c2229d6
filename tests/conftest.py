"""Shared pytest fixtures for envguard tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from envguard.schema.defaults import DEFAULT_RULES, default_registry
from envguard.schema.registry import SchemaRegistry
from envguard.services.configuration import ConfigurationService


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects (CLI invocations call it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    envguard = logging.getLogger("envguard")
    envguard_level = envguard.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    envguard.setLevel(envguard_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> SchemaRegistry:
    """A fresh registry holding the recognized key table."""
    return default_registry()


@pytest.fixture
def env() -> dict[str, str]:
    """An empty, test-owned configuration source."""
    return {}


@pytest.fixture
def config(registry: SchemaRegistry, env: dict[str, str]) -> ConfigurationService:
    """ConfigurationService reading from the ``env`` fixture dict."""
    return ConfigurationService(registry, env)


@pytest.fixture
def _clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every recognized key and ENVGUARD_* flag from os.environ.

    Use via ``@pytest.mark.usefixtures("_clean_environ")`` on CLI test
    classes so the host environment cannot leak into results.
    """
    for key in list(os.environ):
        if key in DEFAULT_RULES or key.startswith("ENVGUARD_"):
            monkeypatch.delenv(key)
