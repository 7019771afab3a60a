"""Command: show which domain serves a request."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from multidomain.commands._base import MdCommand

if TYPE_CHECKING:
    from multidomain.commands._context import AppContext


@click.command(
    cls=MdCommand,
    examples="""\
  multidomain resolve --host company.example.com --path /partners/
  multidomain resolve --host example.org:8080 --path /admin/
  multidomain --json resolve --host shop.company.example.com""",
)
@click.option("--host", required=True, help="HTTP Host header of the request.")
@click.option("--path", default="/", show_default=True, help="Request path.")
@click.pass_obj
def resolve(app: AppContext, host: str, path: str) -> None:
    """Resolve the active domain and native path for a request."""
    app.emit(app.inspect.resolve(host, path))
