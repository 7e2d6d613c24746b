"""Click command classes that take an ``examples=`` text.

Commands built with one of these classes get an eager ``--examples`` flag
that prints the text and exits before any argument is validated.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(text: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(text)
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class DnsCommand(click.Command):
    """A click Command accepting ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class DnsGroup(click.Group):
    """A click Group accepting ``examples=``; its subcommands default to DnsCommand."""

    command_class = DnsCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))
