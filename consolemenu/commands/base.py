from abc import ABC, abstractmethod

import typer
from rich.console import Console

from ..config import Settings

console = Console(stderr=True)


class CommandBase(ABC):
    """
    an abstract base class for commands
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def run(self, *args, **kwargs):
        """
        method called by typer. wraps the command logic in a generic error handler
        """
        try:
            return self.execute(*args, **kwargs)
        except (typer.Abort, typer.Exit):
            # let typer handle its own exits
            raise
        except KeyboardInterrupt:
            console.print("[yellow]selection cancelled[/yellow]")
            raise typer.Exit(code=1)
        except Exception as e:
            console.print(f"[bold red]an unexpected error occurred: {e}[/bold red]")
            raise typer.Abort() from e

    @abstractmethod
    def execute(self, *args, **kwargs):
        """
        the main entry method for the cmd logic
        """
        ...
