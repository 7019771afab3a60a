"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy registry construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from multidomain.domain.errors import MultiDomainError
from multidomain.output.formatters import format_result

if TYPE_CHECKING:
    from multidomain.config.settings import MultiDomainSettings
    from multidomain.services.inspect import InspectService
    from multidomain.services.registry import DomainRegistry
    from multidomain.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The domain registry is built on first use so ``--help`` and
    ``--version`` never read or validate the domain table.
    """

    def __init__(self, settings: MultiDomainSettings) -> None:
        self.settings = settings
        self._registry: DomainRegistry | None = None

        from multidomain.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> DomainRegistry:
        """The domain registry (built lazily on first access)."""
        if self._registry is None:
            from multidomain.services.registry import DomainRegistry

            try:
                self._registry = DomainRegistry.from_config(self.settings.to_config())
            except (MultiDomainError, ValidationError) as exc:
                raise click.ClickException(f"Invalid domain configuration: {exc}") from exc
        return self._registry

    @property
    def inspect(self) -> InspectService:
        from multidomain.services.inspect import InspectService

        return InspectService(self.registry)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
