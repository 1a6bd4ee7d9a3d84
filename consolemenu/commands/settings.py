from typing import Annotated

import questionary
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from typer import Context

from .. import config

app = typer.Typer(invoke_without_command=True)
console = Console()


def _show_settings():
    """loads and displays current settings"""
    settings = config.load_config()
    table = Table("setting", "value")
    table.add_row("flash_ms", f"{settings.flash_ms} ms")
    table.add_row("rule", settings.rule or "[grey50]empty[/grey50]")
    table.add_row(
        "highlight_color",
        f"[{settings.highlight_color}]{settings.highlight_color}[/{settings.highlight_color}]",
    )
    table.add_row(
        "alert_color",
        f"[{settings.alert_color}]{settings.alert_color}[/{settings.alert_color}]",
    )
    console.print(table)


def _update(**changes) -> None:
    try:
        config.update_config(**changes)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]error: {field}: {error['msg']}[/red]")
        raise typer.Abort() from e


@app.callback(invoke_without_command=True)
def main(ctx: Context):
    """manage selector settings"""
    if ctx.invoked_subcommand is None:
        _show_settings()


@app.command()
def show():
    """show current settings"""
    _show_settings()


@app.command()
def flash(
    duration_ms: Annotated[
        int, typer.Argument(help="how long a rejected keystroke flashes, in ms")
    ],
):
    """set the flash duration for rejected keystrokes"""
    _update(flash_ms=duration_ms)
    console.print(f"flash duration set to {duration_ms} ms")


@app.command()
def rule(
    text: Annotated[str, typer.Argument(help="separator line drawn around options")],
):
    """set the separator line"""
    _update(rule=text)
    console.print(f"rule set to: {text}")


@app.command()
def colors(
    highlight: Annotated[str, typer.Argument(help="color of the matched option")],
    alert: Annotated[str, typer.Argument(help="color of rejected keystrokes")] = "red",
):
    """set the highlight and alert colors"""
    _update(highlight_color=highlight.lower(), alert_color=alert.lower())
    console.print(f"colors set to {highlight.lower()} / {alert.lower()}")


@app.command()
def reset(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
):
    """restore the default settings"""
    if not yes and not questionary.confirm("reset all settings?", default=False).ask():
        console.print("[yellow]operation cancelled[/yellow]")
        raise typer.Abort()
    config.reset_config()
    console.print("[green]settings reset[/green]")
