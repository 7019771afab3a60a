"""Subcommand modules for multidomain.

Provides register_commands() which uses deferred imports to keep
``multidomain --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from multidomain.commands.domains import domains
    from multidomain.commands.resolve import resolve
    from multidomain.commands.translate import link, native, vanity

    cli.add_command(domains)
    cli.add_command(resolve)
    cli.add_command(native)
    cli.add_command(vanity)
    cli.add_command(link)
