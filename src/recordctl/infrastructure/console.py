"""Console-backed input source and output sink for the prompt loop."""

from __future__ import annotations

import click

from recordctl.domain.prompting import StreamInput


def console_input() -> StreamInput:
    """Line reader over Click's stdin text stream."""
    return StreamInput(click.get_text_stream("stdin"))


class ConsoleOutput:
    """OutputSink writing through ``click.echo``.

    With ``err=True`` everything goes to stderr, keeping stdout clean for
    ``--json`` output.
    """

    def __init__(self, *, err: bool = False) -> None:
        self._err = err

    def write_prompt(self, text: str) -> None:
        click.echo(text, nl=False, err=self._err)

    def write_line(self, text: str) -> None:
        click.echo(text, err=self._err)
