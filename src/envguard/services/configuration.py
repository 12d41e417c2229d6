"""ConfigurationService: the three access contracts over the validator.

* ``has(key)``: existence check, never raises.
* ``get(key)``: synchronous fetch, raises InvalidConfigurationError.
* ``require(key)``: returns an already-settled future that resolves with
  the value or rejects with InvalidConfigurationError /
  MissingConfigurationError.  It never raises synchronously.

The source is read on every call, so the service always sees the current
environment snapshot.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from concurrent.futures import Future
from typing import Any

from envguard.domain.errors import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from envguard.domain.outcome import ValidationOutcome
from envguard.schema.registry import SchemaRegistry
from envguard.services.validator import Validator

logger = logging.getLogger(__name__)


class ConfigurationService:
    """Typed access to a flat key-value source governed by a schema.

    Usage::

        config = ConfigurationService(default_registry())
        port = config.get("PORT")
        db_url = await asyncio.wrap_future(config.require("DATABASE_URL"))

    Attributes:
        registry: The schema in effect.  May be replaced wholesale between
            calls (tests do this); never mutated in place.
        source: Mapping read on each call.  Defaults to ``os.environ``.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        source: Mapping[str, str] | None = None,
    ) -> None:
        self.registry = registry
        self.source: Mapping[str, str] = os.environ if source is None else source

    def raw(self, key: str) -> str | None:
        """Return the unvalidated source value for *key* (None when absent)."""
        return self.source.get(key)

    def validate(self, key: str) -> ValidationOutcome:
        """Validate the current source value of *key* against the schema."""
        return Validator(self.registry).validate(key, self.raw(key))

    def has(self, key: str) -> bool:
        """True iff *key* resolves to a valid, non-absent value.

        A source that fails to read counts as the key not being there.
        """
        try:
            return self.validate(key).present
        except Exception as exc:
            logger.debug("has(%s) failed: %s", key, exc)
            return False

    def get(self, key: str) -> Any:
        """Return the coerced value (or default) for *key*, None when absent.

        Raises:
            InvalidConfigurationError: The source value fails its rule.
        """
        outcome = self.validate(key)
        if outcome.error is not None:
            raise InvalidConfigurationError(
                key, outcome.error.reason, constraint=outcome.error.constraint
            )
        return outcome.value

    def require(self, key: str) -> Future[Any]:
        """Resolve *key* into a settled future.

        The future rejects with :class:`MissingConfigurationError` when the
        key resolves to None, and with :class:`InvalidConfigurationError`
        when its value is invalid.
        """
        future: Future[Any] = Future()
        try:
            value = self.get(key)
            if value is None:
                raise MissingConfigurationError(key)
        except Exception as exc:
            logger.debug("require(%s) rejected: %s", key, exc)
            future.set_exception(exc)
        else:
            future.set_result(value)
        return future

    def require_all(self, keys: Iterable[str]) -> Future[dict[str, Any]]:
        """Require every key in *keys* at once.

        Resolves with ``{key: value}`` when all keys resolve.  Otherwise
        rejects with an :class:`ExceptionGroup` holding one error per
        failing key, so a startup gate can report every problem together.
        """
        values: dict[str, Any] = {}
        errors: list[ConfigurationError] = []
        for key in keys:
            pending = self.require(key)
            exc = pending.exception()
            if exc is None:
                values[key] = pending.result()
            elif isinstance(exc, ConfigurationError):
                errors.append(exc)
            else:
                failed: Future[dict[str, Any]] = Future()
                failed.set_exception(exc)
                return failed

        future: Future[dict[str, Any]] = Future()
        if errors:
            future.set_exception(ExceptionGroup("configuration is incomplete", errors))
        else:
            future.set_result(values)
        return future
