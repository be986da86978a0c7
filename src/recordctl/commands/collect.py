"""Command: collect validated person records and save them as CSV."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from recordctl.commands._base import RecordCommand

if TYPE_CHECKING:
    from recordctl.commands._context import AppContext


@click.command(
    cls=RecordCommand,
    examples="""\
  recordctl collect
  recordctl collect --output people
  recordctl collect -o people.csv --output-dir data
  printf 'Ann\\nLee\\n000001\\na@b.com\\n1990\\nN\\n' | recordctl --json collect -o people""",
)
@click.option(
    "-o",
    "--output",
    "file_name",
    default=None,
    help="CSV file name (.csv is appended if missing). Prompted for when omitted.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to save into (default: [collect] output_dir, usually ./src).",
)
@click.pass_obj
def collect(app: AppContext, file_name: str | None, output_dir: Path | None) -> None:
    """Prompt for records (name, ID, email, birth year) until you answer N, then save."""
    from recordctl.infrastructure.console import ConsoleOutput, console_input
    from recordctl.services.collect import CollectService

    # Prompts share stdout with the result unless --json needs it clean.
    sink = ConsoleOutput(err=app.settings.json_output)
    result = CollectService(app.settings).collect_and_save(
        console_input(),
        sink,
        file_name=file_name,
        output_dir=output_dir,
    )
    app.emit(result)
