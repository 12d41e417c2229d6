"""CheckService: startup gate over every registered configuration key.

Validates the registered keys (or an explicit subset) against the current
source and reports each one as ``set``, ``default``, ``unset``,
``invalid`` or ``missing``.  The result is unhealthy when any key is
invalid or any required key resolves to nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from envguard.domain.errors import MissingConfigurationError
from envguard.services.base import BaseService
from envguard.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CheckService(BaseService):
    """Validate configuration as a whole and summarize its health."""

    def check(
        self,
        keys: Sequence[str] = (),
        *,
        required: Sequence[str] = (),
        require_all: bool = False,
    ) -> ServiceResult:
        """Check *keys* (default: every registered key).

        Args:
            keys: Keys to check. Empty means the whole registry.
            required: Keys that must resolve to a value.
            require_all: Treat every checked key as required.
        """
        checked = list(dict.fromkeys([*(keys or self._config.registry), *required]))
        must_resolve = checked if require_all else list(dict.fromkeys(required))

        missing: set[str] = set()
        group = self._config.require_all(must_resolve).exception()
        if isinstance(group, ExceptionGroup):
            missing = {
                exc.key for exc in group.exceptions if isinstance(exc, MissingConfigurationError)
            }

        items: list[dict[str, Any]] = []
        issues: list[dict[str, Any]] = []
        for key in checked:
            outcome = self._config.validate(key)
            item: dict[str, Any] = {"key": key, "registered": key in self._config.registry}
            if outcome.error is not None:
                item["status"] = "invalid"
                item["constraint"] = outcome.error.constraint
                item["message"] = f"{key} is not valid: {outcome.error.reason}"
                issues.append(item)
            elif key in missing:
                item["status"] = "missing"
                item["message"] = f"{key} is not set"
                issues.append(item)
            else:
                origin = self._origin(key)
                item["status"] = "set" if origin == "environment" else origin
            items.append(item)

        logger.debug("Checked %d keys, %d issues", len(items), len(issues))
        if issues:
            noun = "issue" if len(issues) == 1 else "issues"
            return ServiceResult.failure(
                "check",
                "CONFIG_UNHEALTHY",
                f"{len(issues)} configuration {noun}",
                {"issues": issues, "count": len(items)},
            )
        return ServiceResult.success(
            "check",
            {"count": len(items), "healthy": True, "items": items},
        )
