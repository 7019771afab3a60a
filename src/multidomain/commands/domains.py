"""Command: list configured domains."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from multidomain.commands._base import MdCommand

if TYPE_CHECKING:
    from multidomain.commands._context import AppContext


@click.command(
    cls=MdCommand,
    examples="""\
  multidomain domains
  multidomain --json domains
  multidomain -c deploy/multidomain.toml domains""",
)
@click.pass_obj
def domains(app: AppContext) -> None:
    """List configured domains with their merged path patterns."""
    app.emit(app.inspect.list_domains())
