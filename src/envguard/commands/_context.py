"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy ConfigurationService construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envguard.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from envguard.config.settings import EnvguardSettings
    from envguard.services.configuration import ConfigurationService
    from envguard.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The configuration service is built on first use so ``--help`` and
    ``--version`` never touch the schema.
    """

    def __init__(
        self,
        settings: EnvguardSettings,
        config: ConfigurationService | None = None,
    ) -> None:
        self.settings = settings
        self._config = config

        from envguard.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            level=settings.log_level,
        )

    @property
    def config(self) -> ConfigurationService:
        """The configuration service over the process environment."""
        if self._config is None:
            from envguard.schema.defaults import default_registry
            from envguard.services.configuration import ConfigurationService

            self._config = ConfigurationService(default_registry())
        return self._config

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
