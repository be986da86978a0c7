"""Subcommand modules for recordctl.

Provides register_commands() which uses deferred imports to keep
``recordctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from recordctl.commands.collect import collect
    from recordctl.commands.inspect import inspect_cmd

    cli.add_command(collect)
    cli.add_command(inspect_cmd)
