"""Subcommand modules for dnsname.

Provides register_commands() which uses deferred imports to keep
``dnsname --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group.

    Uses deferred imports so modules are only loaded when actually invoked.
    """
    from dnsname.commands.check import check
    from dnsname.commands.compare import compare
    from dnsname.commands.labels import labels
    from dnsname.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(labels)
    cli.add_command(compare)
    cli.add_command(check)
