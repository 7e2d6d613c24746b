"""Command: list the labels of a name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsname.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsname.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsname labels www.google.com
  dnsname labels www.google.com.
  dnsname -q labels blog.bbc.co.uk""",
)
@click.argument("name")
@click.pass_obj
def labels(app: AppContext, name: str) -> None:
    """List the labels of NAME, left to right."""
    app.emit(app.service.labels(name))
