import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def err_print(text: str) -> None:
    """Prints text in red to stderr."""
    print(f"\033[1;31merror: {text}\033[0m", file=sys.stderr)


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """configures the root logger once for the cli

    while a selector runs the screen belongs to curses, so a log file is the
    only place where debug output stays readable
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        # debug output on stderr would land inside the curses screen
        handler.setLevel(max(level, logging.INFO))

    logging.basicConfig(level=level, handlers=[handler], force=True)
