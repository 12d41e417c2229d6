"""CLI settings: flags and ``ENVGUARD_*`` env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``ENVGUARD_*`` prefix
  3. Code defaults

These settings govern envguard's own output and logging.  The
configuration envguard *validates* lives in the schema registry, not here.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic_settings import BaseSettings


class EnvguardSettings(BaseSettings):
    """Frozen settings for the envguard CLI.

    Stored on :class:`~envguard.commands._context.AppContext` at the CLI
    root level.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENVGUARD_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    log_level: Literal["fatal", "error", "warn", "info", "debug", "trace"] | None = None

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> EnvguardSettings:
        """Construct settings from a CLI invocation.

        Flags left at their Click default (False) do not mask an
        ``ENVGUARD_*`` env var; only flags actually turned on override.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        return cls(**overrides)
