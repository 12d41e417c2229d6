"""ValidationOutcome and ValidationError: the result of validating one key.

INVARIANT: an outcome is either ``ok`` with a value (possibly None, meaning
absent) or not ``ok`` with an error.  Never both.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator


class ValidationError(BaseModel):
    """A coercion or constraint failure for one key."""

    model_config = {"frozen": True}

    key: str
    constraint: str
    reason: str


class ValidationOutcome(BaseModel):
    """Ok/Error result of running the validator against one raw input.

    Attributes:
        ok: Whether the input passed coercion and every constraint.
        key: The configuration key that was validated.
        value: The coerced value or the rule default (None when absent).
        error: The violated constraint when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    key: str
    value: Any = None
    error: ValidationError | None = None

    @model_validator(mode="after")
    def _check_tag(self) -> ValidationOutcome:
        if self.ok and self.error is not None:
            raise ValueError("a successful outcome cannot carry an error")
        if not self.ok and (self.error is None or self.value is not None):
            raise ValueError("a failed outcome carries an error and no value")
        return self

    @classmethod
    def success(cls, key: str, value: Any) -> ValidationOutcome:
        return cls(ok=True, key=key, value=value)

    @classmethod
    def failure(cls, key: str, constraint: str, reason: str) -> ValidationOutcome:
        error = ValidationError(key=key, constraint=constraint, reason=reason)
        return cls(ok=False, key=key, error=error)

    @property
    def present(self) -> bool:
        """True when the outcome resolved to an actual value."""
        return self.ok and self.value is not None
