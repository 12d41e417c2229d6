"""Command: list the registered configuration keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envguard.commands._base import EnvguardCommand

if TYPE_CHECKING:
    from envguard.commands._context import AppContext


@click.command(
    cls=EnvguardCommand,
    examples="""\
  envguard schema
  envguard -v schema
  envguard --json schema""",
)
@click.pass_obj
def schema(app: AppContext) -> None:
    """Describe every recognized key: type, default, constraints."""
    from envguard.services.lookup import LookupService

    app.emit(LookupService(app.config).schema())
