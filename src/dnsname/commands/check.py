"""Command: batch validation of names, one per line."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from dnsname.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsname.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsname check zone-names.txt
  cat names.txt | dnsname check
  dnsname check --fail-fast names.txt
  dnsname --json check names.txt""",
)
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--fail-fast", is_flag=True, help="Stop at the first invalid line.")
@click.option("--comment-prefix", default=None, help="Skip lines starting with this prefix.")
@click.pass_obj
def check(
    app: AppContext,
    source: BinaryIO,
    fail_fast: bool,
    comment_prefix: str | None,
) -> None:
    """Validate every name in SOURCE (default: stdin).

    Lines are read as bytes and decoded one by one, so a line that is
    not UTF-8 is listed as invalid.  Exits with code 1 if any line is
    invalid.
    """
    cfg = app.settings.check
    app.emit(
        app.service.check(
            source,
            comment_prefix=cfg.comment_prefix if comment_prefix is None else comment_prefix,
            skip_blank=cfg.skip_blank,
            fail_fast=fail_fast or cfg.fail_fast,
        )
    )
