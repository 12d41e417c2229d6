"""Root CLI group for envguard with global flags and command registration."""

from __future__ import annotations

import click

from envguard import __version__
from envguard.commands import register_commands
from envguard.commands._context import AppContext
from envguard.config.logging import LEVELS
from envguard.config.settings import EnvguardSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="envguard")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--log-level",
    type=click.Choice(list(LEVELS)),
    default=None,
    help="Log verbosity, overriding --verbose.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    log_level: str | None,
) -> None:
    """envguard: validate process configuration before startup."""
    settings = EnvguardSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        log_level=log_level,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
