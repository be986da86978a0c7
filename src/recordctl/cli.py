"""recordctl entry point: global output/logging flags shared by every command."""

from __future__ import annotations

import click

from recordctl import __version__
from recordctl.commands import register_commands
from recordctl.commands._context import AppContext
from recordctl.config.settings import RecordSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="recordctl")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Print the result as JSON on stdout; prompts and echoed text move to stderr.",
)
@click.option("-q", "--quiet", is_flag=True, help="Print only the saved path or an OK/ERROR line.")
@click.option(
    "-v", "--verbose", is_flag=True, help="Debug logging and extra result fields (bytes, detail)."
)
@click.option("--log-json", is_flag=True, help="Emit log lines on stderr as JSON objects.")
@click.option(
    "--no-interact",
    is_flag=True,
    help="Never prompt for a file to inspect; 'inspect' then requires PATH. "
    "'collect' still reads its answers from stdin.",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="FILE",
    help="Use this recordctl.toml instead of searching upward from the current directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """Collect validated person records into CSV files, or summarize a text file.

    \b
    collect   prompt for name, ID, email and birth year until you answer N
    inspect   echo a text file and count its lines, words and characters
    """
    ctx.obj = AppContext(
        RecordSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            no_interact=no_interact,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
