"""Rule models: the validation contract attached to one configuration key.

A Rule names the accepted type, its constraints, an optional default, a
human-readable description, and (for booleans) the token grammar used to
read ``"yes"`` / ``"off"`` style flags.  Rules are frozen value objects;
a rule whose default breaks its own constraints cannot be constructed.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any, NamedTuple

from pydantic import AnyUrl, BaseModel, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError


class RuleType(StrEnum):
    """Target types a raw string can be coerced into."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    URI = "uri"
    ANY = "any"


class Violation(NamedTuple):
    """A broken constraint: its name and a human-readable reason."""

    constraint: str
    reason: str


_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)
_WHITESPACE = re.compile(r"\s")

# Python types a default may take, per rule type.  bool is an int subclass,
# so NUMBER excludes it explicitly in _default_type_matches().
_DEFAULT_TYPES: dict[RuleType, tuple[type, ...]] = {
    RuleType.NUMBER: (int, float),
    RuleType.STRING: (str,),
    RuleType.BOOLEAN: (bool,),
    RuleType.URI: (str,),
}


# --- Boolean grammar ---


class BooleanGrammar(BaseModel):
    """Truthy/falsy token sets for one boolean rule.

    ``"true"`` and ``"false"`` are always recognized; ``truthy`` and
    ``falsy`` extend them.  With ``case_insensitive`` both the token sets
    and the input are lower-cased, so ``truthy={"Y"}`` matches ``"y"``.
    """

    model_config = {"frozen": True}

    truthy: frozenset[str] = frozenset()
    falsy: frozenset[str] = frozenset()
    case_insensitive: bool = False

    @model_validator(mode="before")
    @classmethod
    def _fold_tokens(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("case_insensitive"):
            data = {
                **data,
                "truthy": {str(t).lower() for t in data.get("truthy", ())},
                "falsy": {str(t).lower() for t in data.get("falsy", ())},
            }
        return data

    @model_validator(mode="after")
    def _check_disjoint(self) -> BooleanGrammar:
        overlap = (self.truthy | {"true"}) & (self.falsy | {"false"})
        if overlap:
            msg = f"tokens cannot be both truthy and falsy: {sorted(overlap)}"
            raise ValueError(msg)
        return self

    def parse(self, token: str) -> bool | None:
        """Return the boolean *token* stands for, or None if unrecognized."""
        normalized = token.lower() if self.case_insensitive else token
        if normalized == "true" or normalized in self.truthy:
            return True
        if normalized == "false" or normalized in self.falsy:
            return False
        return None


PLAIN_BOOLEAN = BooleanGrammar()


# --- Rule ---


class Rule(BaseModel):
    """Validation, coercion and default contract for one configuration key.

    Attributes:
        type: Target type of the coercion.
        description: Human-readable explanation shown by ``envguard schema``.
        default: Value used when the key is absent.  None means no default.
        minimum: Inclusive lower bound (NUMBER).
        maximum: Inclusive upper bound (NUMBER).
        allowed_values: Closed set of accepted values (case-sensitive).
        pattern: Regular expression the whole value must match (STRING).
        uri_schemes: Accepted URI schemes (URI).
        allow_empty: Accept ``""`` for typed rules instead of rejecting it.
        secret: Mask the value in ``check`` and ``schema`` output.
        boolean_grammar: Token grammar for BOOLEAN rules.
    """

    model_config = {"frozen": True}

    type: RuleType = RuleType.ANY
    description: str = ""
    default: Any = None
    minimum: float | None = None
    maximum: float | None = None
    allowed_values: tuple[Any, ...] | None = None
    pattern: str | None = None
    uri_schemes: tuple[str, ...] | None = None
    allow_empty: bool = False
    secret: bool = False
    boolean_grammar: BooleanGrammar | None = None

    @model_validator(mode="after")
    def _check_default(self) -> Rule:
        if self.boolean_grammar is not None and self.type is not RuleType.BOOLEAN:
            msg = f"boolean_grammar given for a {self.type} rule"
            raise ValueError(msg)
        if self.default is None:
            return self
        if not self._default_type_matches():
            msg = f"default {self.default!r} is not a valid {self.type}"
            raise ValueError(msg)
        violation = self.violation(self.default)
        if violation is not None:
            msg = f"default {self.default!r} {violation.reason}"
            raise ValueError(msg)
        return self

    def _default_type_matches(self) -> bool:
        expected = _DEFAULT_TYPES.get(self.type)
        if expected is None:
            return True
        if self.type is RuleType.NUMBER and isinstance(self.default, bool):
            return False
        return isinstance(self.default, expected)

    @property
    def grammar(self) -> BooleanGrammar:
        """The boolean grammar in effect (plain true/false when unset)."""
        return self.boolean_grammar or PLAIN_BOOLEAN

    def violation(self, value: Any) -> Violation | None:
        """Check an already-coerced *value* against this rule's constraints.

        Returns the first violated constraint, or None if *value* passes.
        """
        is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
        if is_number and self.minimum is not None and value < self.minimum:
            return Violation("minimum", f"must be greater than or equal to {_num(self.minimum)}")
        if is_number and self.maximum is not None and value > self.maximum:
            return Violation("maximum", f"must be less than or equal to {_num(self.maximum)}")
        if self.allowed_values is not None and value not in self.allowed_values:
            choices = ", ".join(str(v) for v in self.allowed_values)
            return Violation("allowed_values", f"must be one of [{choices}]")
        if isinstance(value, str):
            if self.pattern is not None and re.fullmatch(self.pattern, value) is None:
                return Violation("pattern", f"must match the pattern {self.pattern}")
            if self.uri_schemes is not None and not _uri_has_scheme(value, self.uri_schemes):
                schemes = "|".join(self.uri_schemes)
                return Violation("uri", f"must be a valid uri with a scheme matching {schemes}")
        return None

    def constraints(self) -> dict[str, Any]:
        """Return the constraints that are set, keyed by name."""
        names = ("minimum", "maximum", "allowed_values", "pattern", "uri_schemes")
        found: dict[str, Any] = {}
        for name in names:
            value = getattr(self, name)
            if value is not None:
                found[name] = list(value) if isinstance(value, tuple) else value
        if self.boolean_grammar is not None:
            found["truthy"] = sorted(self.boolean_grammar.truthy | {"true"})
            found["falsy"] = sorted(self.boolean_grammar.falsy | {"false"})
            found["case_insensitive"] = self.boolean_grammar.case_insensitive
        return found


WILDCARD_RULE = Rule(type=RuleType.ANY)
"""Fallback rule for keys with no schema entry: no constraints, no default."""


def _uri_has_scheme(value: str, schemes: tuple[str, ...]) -> bool:
    # AnyUrl strips and percent-encodes whitespace, but the raw value is returned.
    if _WHITESPACE.search(value):
        return False
    try:
        url = _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return url.scheme in {s.lower() for s in schemes}


def _num(bound: float) -> str:
    """Render a bound without a trailing ``.0`` for whole numbers."""
    return str(int(bound)) if float(bound).is_integer() else str(bound)
