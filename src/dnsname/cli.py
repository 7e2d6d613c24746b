"""Root CLI group for dnsname with global flags and command registration."""

from __future__ import annotations

import click

from dnsname import __version__
from dnsname.commands import register_commands
from dnsname.commands._base import DnsGroup
from dnsname.commands._context import AppContext
from dnsname.config.settings import DnsNameSettings


@click.group(
    cls=DnsGroup,
    invoke_without_command=True,
    examples="""\
  dnsname parse www.example.com.
  dnsname labels தமிழ்.wellsfargo.com
  dnsname --json check names.txt""",
)
@click.version_option(version=__version__, prog_name="dnsname")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """dnsname — validate and inspect DNS domain names."""
    ctx.ensure_object(dict)
    settings = DnsNameSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
