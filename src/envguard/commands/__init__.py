"""Subcommand modules for envguard.

Provides register_commands() which uses deferred imports to keep
``envguard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from envguard.commands.check import check
    from envguard.commands.get import get
    from envguard.commands.schema import schema

    cli.add_command(check)
    cli.add_command(get)
    cli.add_command(schema)
