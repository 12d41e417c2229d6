"""Validator: coerce one raw string against its schema rule.

Validation is a pure function of ``(rule, raw)``: the validator holds a
registry reference and nothing else, and never reads the environment
itself.  Callers supply the raw input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Annotated, Any

from pydantic import AllowInfNan, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from envguard.domain.outcome import ValidationOutcome
from envguard.domain.rules import Rule, RuleType
from envguard.schema.registry import SchemaRegistry

logger = logging.getLogger(__name__)

# int first so integral strings stay ints ("8080" -> 8080, "1.5" -> 1.5).
_NUMBER_ADAPTER: TypeAdapter[int | float] = TypeAdapter(
    int | Annotated[float, AllowInfNan(False)]
)


class CoercionError(ValueError):
    """Raw input could not be converted to the rule's type."""


def _coerce_number(raw: str, rule: Rule) -> int | float:
    # pydantic reads "1_000" as 1000; digit separators are not numeric input here.
    if "_" in raw:
        raise CoercionError("not a number")
    try:
        return _NUMBER_ADAPTER.validate_python(raw.strip())
    except PydanticValidationError as exc:
        raise CoercionError("not a number") from exc


def _coerce_boolean(raw: str, rule: Rule) -> bool:
    value = rule.grammar.parse(raw)
    if value is None:
        raise CoercionError("not a recognized boolean token")
    return value


def _identity(raw: str, rule: Rule) -> str:
    return raw


_COERCERS: dict[RuleType, Callable[[str, Rule], Any]] = {
    RuleType.NUMBER: _coerce_number,
    RuleType.STRING: _identity,
    RuleType.BOOLEAN: _coerce_boolean,
    RuleType.URI: _identity,
    RuleType.ANY: _identity,
}


class Validator:
    """Resolve a key's rule and validate a raw string-or-absent input."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self.registry = registry

    def validate(self, key: str, raw: str | None) -> ValidationOutcome:
        """Validate *raw* (None meaning absent) against the rule for *key*."""
        return validate_rule(key, self.registry.lookup(key), raw)


def validate_rule(key: str, rule: Rule, raw: str | None) -> ValidationOutcome:
    """Apply *rule* to *raw*.

    * Absent input resolves to the rule default (None when it has none).
    * The wildcard (ANY) rule accepts any present string unchanged.
    * Typed rules reject ``""`` unless ``allow_empty`` is set, then coerce
      and check constraints in order, reporting the first failure.
    """
    if raw is None:
        return ValidationOutcome.success(key, rule.default)
    if rule.type is RuleType.ANY:
        return ValidationOutcome.success(key, raw)
    if raw == "" and not rule.allow_empty:
        return _reject(key, "empty", "is not allowed to be empty")

    try:
        value = _COERCERS[rule.type](raw, rule)
    except CoercionError as exc:
        return _reject(key, "type", str(exc))

    violation = rule.violation(value)
    if violation is not None:
        return _reject(key, violation.constraint, violation.reason)
    return ValidationOutcome.success(key, value)


def _reject(key: str, constraint: str, reason: str) -> ValidationOutcome:
    # The raw value may be a secret, so only the key and reason are logged.
    logger.debug("Rejected %s (%s): %s", key, constraint, reason)
    return ValidationOutcome.failure(key, constraint, reason)
