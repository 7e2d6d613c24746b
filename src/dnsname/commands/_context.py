"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the configured codec and service, and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from dnsname.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dnsname.config.settings import DnsNameSettings
    from dnsname.services.names import NameService
    from dnsname.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is built lazily so ``--help`` and ``--version`` never
    touch the codec.
    """

    def __init__(self, settings: DnsNameSettings) -> None:
        self.settings = settings
        self._service: NameService | None = None

        from dnsname.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> NameService:
        """The name service (created lazily on first access)."""
        if self._service is None:
            from dnsname.services.names import NameService

            self._service = NameService(self.settings.codec())
        return self._service

    def _verbose_meta(self) -> dict[str, Any]:
        config = self.settings.config_path
        return {
            "config": str(config) if config else None,
            "idna": self.settings.idna.model_dump(),
        }

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        if settings.verbose and result.meta is None:
            result = result.model_copy(
                update={"meta": self._verbose_meta()},
            )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
