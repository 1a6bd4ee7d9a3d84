from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from typer import Context

from . import __version__, config
from .commands import settings as settings_app
from .commands.select import ListCommand, MenuCommand
from .termutils import setup_logging

app = typer.Typer()
console = Console()

TitleArg = Annotated[str, typer.Argument(help="title shown above the options")]
OptionsArg = Annotated[list[str], typer.Argument(help="the options to choose from")]
IndexOpt = Annotated[
    bool, typer.Option("--index", "-i", help="print the zero-based index instead")
]
OutputOpt = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        dir_okay=False,
        writable=True,
        help="write the selection to this file instead of stdout",
    ),
]


def version_callback(value: bool) -> None:
    if value:
        console.print(f"consolemenu version: {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="show version and exit",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="log debug messages, use together with --log-file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", dir_okay=False, help="write log messages here"),
    ] = None,
):
    """prompt numbered menus or searchable lists in the terminal"""
    setup_logging(verbose=verbose, log_file=log_file)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()
    ctx.obj = {"settings": config.load_config()}


app.add_typer(settings_app.app, name="settings")


@app.command("list")
def list_(
    ctx: Context,
    title: TitleArg,
    options: OptionsArg,
    index: IndexOpt = False,
    output: OutputOpt = None,
):
    """pick an option by typing its name or with the arrow keys"""
    cmd = ListCommand(ctx.obj["settings"])
    cmd.run(title, options, print_index=index, output=output)


@app.command()
def menu(
    ctx: Context,
    title: TitleArg,
    options: OptionsArg,
    index: IndexOpt = False,
    output: OutputOpt = None,
):
    """pick one of up to nine options with the number keys"""
    cmd = MenuCommand(ctx.obj["settings"])
    cmd.run(title, options, print_index=index, output=output)
