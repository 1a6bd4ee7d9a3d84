import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

import typer

from ..listing import show_list
from ..menu import show_menu
from ..termutils import err_print
from .base import CommandBase

logger = logging.getLogger(__name__)

Selector = Callable[..., int]


class SelectCommand(CommandBase):
    """runs one of the selectors and reports the picked option"""

    selector: Selector

    def execute(
        self,
        title: str,
        options: Sequence[str],
        print_index: bool = False,
        output: Path | None = None,
    ):
        index = self.selector(title, options, settings=self.settings)
        result = str(index) if print_index else options[index]
        logger.debug("writing selection %r", result)

        if output is None:
            print(result, file=sys.stdout)
            return
        # keep stdout attached to the terminal, hand the result over via a file
        try:
            output.write_text(result + "\n", encoding="utf-8")
        except OSError as e:
            err_print(f"failed to write to file '{output}': {e}")
            raise typer.Exit(code=1) from e


class ListCommand(SelectCommand):
    selector = staticmethod(show_list)


class MenuCommand(SelectCommand):
    selector = staticmethod(show_menu)
