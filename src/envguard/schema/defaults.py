"""Recognized configuration keys for the API service.

Sparse contract: every key is optional in the environment; rules with a
default fill the gap, rules without one resolve to None until set.
"""

from __future__ import annotations

from typing import Any

from envguard.domain.rules import BooleanGrammar, Rule, RuleType
from envguard.schema.registry import SchemaRegistry

LOG_LEVELS: tuple[str, ...] = ("fatal", "error", "warn", "info", "debug", "trace")

FLAG_TRUTHY = frozenset({"1", "enabled", "on", "yes"})
FLAG_FALSY = frozenset({"0", "disabled", "off", "no"})


def flag(**kwargs: Any) -> Rule:
    """Build a case-insensitive boolean rule reading on/off style tokens."""
    grammar = BooleanGrammar(truthy=FLAG_TRUTHY, falsy=FLAG_FALSY, case_insensitive=True)
    return Rule(type=RuleType.BOOLEAN, boolean_grammar=grammar, **kwargs)


DEFAULT_RULES: dict[str, Rule] = {
    "PORT": Rule(
        type=RuleType.NUMBER,
        minimum=0,
        description="Port to listen on, by default a random port is used",
    ),
    "LOG_LEVEL": Rule(
        type=RuleType.STRING,
        allowed_values=LOG_LEVELS,
        default="debug",
        description=(
            "Level of the logs. available levels are fatal, error, warn, info, debug and trace"
        ),
    ),
    "DATABASE_URL": Rule(
        type=RuleType.URI,
        uri_schemes=("postgres",),
        secret=True,
        description="Connection string to the main PostgreSQL database",
    ),
    "OTHER_API_URL": Rule(
        type=RuleType.URI,
        uri_schemes=("https",),
        default="https://url.com",
        description="API endpoint for the <URL> API",
    ),
    "ADMIN_CLIENT_ID": Rule(
        type=RuleType.STRING,
        description="Client ID to make requests on the <URL> API",
    ),
    "ADMIN_CLIENT_SECRET": Rule(
        type=RuleType.STRING,
        secret=True,
        description="Client Secret to make requests on the <URL> API",
    ),
    "FEATURE_FLIPPING": flag(
        default=False,
        description="Allow flagging a feature as invalid",
    ),
}


def default_registry() -> SchemaRegistry:
    """Build the registry holding :data:`DEFAULT_RULES`."""
    return SchemaRegistry(DEFAULT_RULES)
