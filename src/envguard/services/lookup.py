"""LookupService: single-key resolution and schema listing for the CLI."""

from __future__ import annotations

from envguard.domain.errors import (
    InvalidConfigurationError,
    MissingConfigurationError,
)
from envguard.services.base import BaseService
from envguard.services.result import ServiceResult


class LookupService(BaseService):
    """Read-only views over the configuration service."""

    def get(self, key: str, *, require: bool = False) -> ServiceResult:
        """Resolve *key*; with *require*, an absent value is an error too."""
        if require:
            exc = self._config.require(key).exception()
            if isinstance(exc, MissingConfigurationError):
                return ServiceResult.failure(
                    "get", "MISSING_CONFIGURATION", str(exc), {"key": key}
                )
        try:
            value = self._config.get(key)
        except InvalidConfigurationError as exc:
            return ServiceResult.failure(
                "get",
                "INVALID_CONFIGURATION",
                str(exc),
                {"key": key, "constraint": exc.constraint, "reason": exc.reason},
            )

        rule = self._config.registry.lookup(key)
        return ServiceResult.success(
            "get",
            {
                "key": key,
                "value": value,
                "type": str(rule.type),
                "origin": self._origin(key),
                "registered": key in self._config.registry,
            },
        )

    def schema(self) -> ServiceResult:
        """List every registered key with its type, constraints and default."""
        items = [
            {
                "key": key,
                "type": str(rule.type),
                "default": self._display(key, rule.default),
                "constraints": rule.constraints(),
                "description": rule.description,
                "secret": rule.secret,
            }
            for key, rule in self._config.registry.items()
        ]
        return ServiceResult.success("schema", {"count": len(items), "items": items})
