"""Root CLI group for multidomain with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from multidomain import __version__
from multidomain.commands import register_commands
from multidomain.commands._context import AppContext
from multidomain.config.settings import MultiDomainSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="multidomain")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """multidomain: inspect hostname-to-path domain mappings."""
    ctx.ensure_object(dict)
    try:
        settings = MultiDomainSettings.load(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
