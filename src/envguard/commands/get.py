"""Command: resolve a single configuration key."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envguard.commands._base import EnvguardCommand

if TYPE_CHECKING:
    from envguard.commands._context import AppContext


@click.command(
    cls=EnvguardCommand,
    examples="""\
  envguard get PORT
  envguard get FEATURE_FLIPPING
  envguard -q get LOG_LEVEL
  envguard get DATABASE_URL --require""",
)
@click.argument("key")
@click.option("--require", is_flag=True, help="Fail when the key resolves to nothing.")
@click.pass_obj
def get(app: AppContext, key: str, require: bool) -> None:
    """Print the resolved value of KEY and where it came from."""
    from envguard.services.lookup import LookupService

    app.emit(LookupService(app.config).get(key, require=require))
