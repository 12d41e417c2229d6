"""SchemaRegistry: key → Rule lookup with an explicit wildcard fallback.

Registries are immutable.  Code that needs a different schema (tests
isolating a single key, for instance) builds a new registry with
:meth:`SchemaRegistry.with_rules` and hands it to the service instead of
mutating a shared one.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from envguard.domain.rules import WILDCARD_RULE, Rule


class SchemaRegistry:
    """Ordered, read-only mapping from configuration key to :class:`Rule`.

    Keys are case-sensitive.  :meth:`lookup` never fails: unknown keys
    resolve to :data:`~envguard.domain.rules.WILDCARD_RULE`.
    """

    def __init__(self, rules: Mapping[str, Rule] | None = None) -> None:
        entries = dict(rules or {})
        for key, rule in entries.items():
            if not isinstance(key, str) or not key:
                msg = f"Schema keys must be non-empty strings, got {key!r}"
                raise ValueError(msg)
            if not isinstance(rule, Rule):
                msg = f"Schema entry {key!r} is not a Rule: {rule!r}"
                raise TypeError(msg)
        self._rules: Mapping[str, Rule] = MappingProxyType(entries)

    def lookup(self, key: str) -> Rule:
        """Return the rule registered for *key*, or the wildcard rule."""
        return self._rules.get(key, WILDCARD_RULE)

    def with_rules(self, rules: Mapping[str, Rule]) -> SchemaRegistry:
        """Return a new registry with *rules* added or replacing existing entries."""
        return SchemaRegistry({**self._rules, **rules})

    def items(self) -> Iterator[tuple[str, Rule]]:
        return iter(self._rules.items())

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"SchemaRegistry({list(self._rules)!r})"
