"""BaseService: shared foundation for the CLI-facing report services.

Every report service receives a :class:`ConfigurationService` at
construction time and reads configuration exclusively through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envguard.services.configuration import ConfigurationService

REDACTED = "********"


class BaseService:
    """Base for services that turn configuration state into ServiceResults.

    Usage::

        class CheckService(BaseService):
            def check(self) -> ServiceResult:
                outcome = self._config.validate("PORT")
                ...
    """

    def __init__(self, config: ConfigurationService) -> None:
        self._config = config

    def _origin(self, key: str) -> str:
        """Where *key*'s value comes from: environment, default, or unset."""
        if self._config.raw(key) is not None:
            return "environment"
        if self._config.registry.lookup(key).default is not None:
            return "default"
        return "unset"

    def _display(self, key: str, value: object) -> object:
        """Return *value* for output, masked when the key's rule is secret."""
        if value is not None and self._config.registry.lookup(key).secret:
            return REDACTED
        return value
