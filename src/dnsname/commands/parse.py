"""Command: validate a single name and describe it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsname.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsname.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsname parse google.com
  dnsname parse google.com.
  dnsname --json parse தமிழ்.wellsfargo.com
  dnsname -q parse Bücher.example""",
)
@click.argument("name")
@click.pass_obj
def parse(app: AppContext, name: str) -> None:
    """Validate NAME and show its ASCII form, Unicode form and labels."""
    app.emit(app.service.parse(name))
