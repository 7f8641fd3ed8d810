"""Command: interactive read-compute-print loop."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click
import structlog

from fibmat.commands._base import FibCommand
from fibmat.domain.parsing import ordinal_phrase

if TYPE_CHECKING:
    from fibmat.commands._context import AppContext

log = structlog.get_logger(__name__)


@click.command(
    cls=FibCommand,
    examples="""\
  fibmat shell
  echo 10 | fibmat shell
  printf '55\\n-8\\nq\\n' | fibmat shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Prompt for indices one line at a time until the quit token or end of input."""
    cfg = app.settings.shell
    while True:
        click.echo(cfg.prompt)
        line = sys.stdin.readline()
        if not line:
            log.debug("shell.eof")
            return

        text = line.rstrip("\r\n")
        if text == cfg.quit_token:
            log.debug("shell.quit")
            return

        result = app.service.compute(text)
        if result.ok:
            click.echo(f"{ordinal_phrase(text)}{result.data['value']}\n")
        elif result.error is not None and result.error.code == "PARSE_ERROR":
            click.echo("Not an integer!\n")
        else:
            msg = result.error.message if result.error else "Unknown error"
            click.echo(f"{msg}\n", err=True)
