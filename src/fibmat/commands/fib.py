"""Command: compute a single Fibonacci number."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import click

from fibmat.commands._base import FibCommand

if TYPE_CHECKING:
    from fibmat.commands._context import AppContext

# ``-`` followed by anything but a digit: a mistyped option, not an index
_OPTION_LIKE = re.compile(r"-[^0-9]", re.ASCII)


@click.command(
    "fib",
    cls=FibCommand,
    # let negative indices such as -8 through as the argument
    context_settings={"ignore_unknown_options": True},
    examples="""\
  fibmat fib 100
  fibmat fib -8
  fibmat --quiet fib 1000
  fibmat --json fib 50
  fibmat -v fib 1000000""",
)
@click.argument("index")
@click.pass_context
def fib_cmd(ctx: click.Context, index: str) -> None:
    """Compute the INDEX-th Fibonacci number (INDEX may be negative)."""
    if _OPTION_LIKE.match(index):
        raise click.NoSuchOption(index, ctx=ctx)
    app: AppContext = ctx.obj
    app.emit(app.service.compute(index))
