"""Subcommand modules for fibmat.

Provides register_commands() which uses deferred imports to keep
``fibmat --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from fibmat.commands.fib import fib_cmd
    from fibmat.commands.shell import shell

    cli.add_command(fib_cmd)
    cli.add_command(shell)
