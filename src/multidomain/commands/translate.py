"""Commands: translate URLs between native and vanity path spaces."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from multidomain.commands._base import MdCommand

if TYPE_CHECKING:
    from multidomain.commands._context import AppContext


@click.command(
    cls=MdCommand,
    examples="""\
  multidomain native company partners/
  multidomain --json native company /careers/jobs/""",
)
@click.argument("key")
@click.argument("url")
@click.pass_obj
def native(app: AppContext, key: str, url: str) -> None:
    """Translate a vanity URL on domain KEY to its native URL."""
    app.emit(app.inspect.native(key, url))


@click.command(
    cls=MdCommand,
    examples="""\
  multidomain vanity company /company/partners/
  multidomain --json vanity company company/about/""",
)
@click.argument("key")
@click.argument("url")
@click.pass_obj
def vanity(app: AppContext, key: str, url: str) -> None:
    """Translate a native URL to its vanity URL on domain KEY."""
    app.emit(app.inspect.vanity(key, url))


@click.command(
    cls=MdCommand,
    examples="""\
  multidomain link --host example.org /company/partners/
  multidomain link --host company.example.com --scheme http /about-us/""",
)
@click.option("--host", required=True, help="HTTP Host header of the page being rendered.")
@click.option("--path", default="/", show_default=True, help="Path of the page being rendered.")
@click.option(
    "--scheme",
    type=click.Choice(["http", "https"]),
    default="https",
    show_default=True,
    help="Scheme for links to other domains.",
)
@click.argument("url")
@click.pass_obj
def link(app: AppContext, host: str, path: str, scheme: str, url: str) -> None:
    """Rewrite a native link URL as it renders on the page at HOST."""
    app.emit(app.inspect.link(host, path, url, scheme=scheme))
