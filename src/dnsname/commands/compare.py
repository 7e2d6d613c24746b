"""Command: byte-wise comparison of two names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsname.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsname.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsname compare google.com google.com.
  dnsname --json compare a.example b.example""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def compare(app: AppContext, left: str, right: str) -> None:
    """Compare LEFT and RIGHT byte by byte after parsing both."""
    app.emit(app.service.compare(left, right))
