"""Command: echo a text file and report line, word, and character counts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from recordctl.commands._base import RecordCommand

if TYPE_CHECKING:
    from recordctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=RecordCommand,
    examples="""\
  recordctl inspect notes.txt
  recordctl inspect            # prompts for a file under ./src
  recordctl inspect README.md --no-echo
  recordctl --json inspect data/people.csv""",
)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--echo/--no-echo",
    default=None,
    help="Echo file content while reading (default: [inspect] echo).",
)
@click.pass_obj
def inspect_cmd(app: AppContext, path: Path | None, echo: bool | None) -> None:
    """Read a text file line by line and summarize it."""
    from recordctl.services.inspect import InspectService
    from recordctl.services.result import ServiceResult

    svc = InspectService(app.settings)
    if path is None:
        if not app.interactive:
            app.emit(
                ServiceResult.failure(
                    "inspect_file",
                    "NO_FILE",
                    "File selection cancelled. No file was processed.",
                )
            )
            return
        start = svc.start_dir()
        selection = click.prompt(f"File to inspect (relative to {start})", type=str)
        path = svc.resolve(selection, start)

    if echo is None:
        echo = app.settings.inspect.echo
    err = app.settings.json_output

    def _echo(line: str) -> None:
        click.echo(line, err=err)

    if echo:
        click.echo(f"--- Reading File: {path.name} ---", err=err)
    result = svc.inspect(path, echo=_echo if echo else None)
    if echo and result.ok:
        click.echo("\n--- End of File Content ---\n", err=err)
    app.emit(result)
