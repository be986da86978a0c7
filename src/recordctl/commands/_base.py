"""Click base command with --examples support.

``--examples`` prints a block of sample invocations and exits, which keeps
``--help`` short while still documenting piped and scripted usage.
"""

from __future__ import annotations

from typing import Any

import click


class RecordCommand(click.Command):
    """Click Command that accepts an ``examples=`` string.

    When given, an eager ``--examples`` flag is added to the command's
    parameters.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
