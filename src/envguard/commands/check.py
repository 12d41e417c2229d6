"""Command: validate the environment against the schema (startup gate)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envguard.commands._base import EnvguardCommand

if TYPE_CHECKING:
    from envguard.commands._context import AppContext


@click.command(
    cls=EnvguardCommand,
    examples="""\
  envguard check
  envguard check PORT LOG_LEVEL
  envguard check --require DATABASE_URL --require PORT
  envguard check --require-all
  envguard --json check""",
)
@click.argument("keys", nargs=-1)
@click.option(
    "--require",
    "required",
    multiple=True,
    metavar="KEY",
    help="Key that must resolve to a value (repeatable).",
)
@click.option("--require-all", is_flag=True, help="Every checked key must resolve to a value.")
@click.pass_obj
def check(
    app: AppContext,
    keys: tuple[str, ...],
    required: tuple[str, ...],
    require_all: bool,
) -> None:
    """Validate configuration; exit 1 if any key is invalid or missing."""
    from envguard.services.check import CheckService

    svc = CheckService(app.config)
    app.emit(svc.check(keys, required=required, require_all=require_all))
