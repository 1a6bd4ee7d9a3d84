import logging
from typing import Sequence

from .config import Settings, load_config
from .terminal import Color, Key, Terminal, run_in_terminal

logger = logging.getLogger(__name__)

# options are picked with a single digit key
MAX_OPTIONS = 9


def check_options(options: Sequence[str]) -> None:
    if not options:
        raise ValueError("at least one option is required")
    if len(options) > MAX_OPTIONS:
        raise ValueError(f"a menu holds at most {MAX_OPTIONS} options")


class MenuSelector:
    """numbered menu, a digit picks an option and enter confirms it"""

    def __init__(
        self,
        terminal: Terminal,
        title: str,
        options: Sequence[str],
        settings: Settings | None = None,
    ):
        check_options(options)
        self.terminal = terminal
        self.title = title
        self.options = list(options)
        self.settings = settings or load_config()
        # 1-based, 0 while nothing is picked
        self.pending = 0

    def draw(self) -> None:
        t = self.terminal
        t.clear()
        t.set_color(Color.DEFAULT)
        t.move(0, 0)
        t.write(self.title)
        t.move(1, 0)
        t.write(self.settings.rule)
        for i, option in enumerate(self.options, start=1):
            t.move(1 + i, 0)
            t.write(f"{i} - {option}")
        t.move(2 + len(self.options), 0)
        t.write(self.settings.rule)

        if self.pending:
            t.set_color(Color.HIGHLIGHT)
            t.move(1 + self.pending, 0)
            t.write(f"{self.pending} - {self.options[self.pending - 1]}")
        t.refresh()

    def feed(self, key: str | Key) -> bool:
        """handles one key, returns True once the pending choice is confirmed"""
        if key is Key.ENTER:
            return self.pending != 0
        if not isinstance(key, str) or len(key) != 1 or not "1" <= key <= "9":
            return False
        if int(key) <= len(self.options):
            self.pending = int(key)
            logger.debug("pending menu choice %d", self.pending)
            self.draw()
        return False

    def run(self) -> int:
        """blocks until a choice is confirmed and returns its zero-based index"""
        self.terminal.set_cursor_visible(False)
        try:
            self.draw()
            while not self.feed(self.terminal.read_key()):
                pass
        finally:
            self.terminal.set_cursor_visible(True)
            self.terminal.set_color(Color.DEFAULT)
            self.terminal.clear()
            self.terminal.refresh()

        logger.debug("selected %r", self.options[self.pending - 1])
        return self.pending - 1


def show_menu(
    title: str,
    options: Sequence[str],
    terminal: Terminal | None = None,
    settings: Settings | None = None,
) -> int:
    """prompts a numbered menu and returns the zero-based index picked"""
    if terminal is not None:
        return MenuSelector(terminal, title, options, settings).run()

    # fail before curses takes over the screen
    check_options(options)
    settings = settings or load_config()
    return run_in_terminal(
        lambda term: MenuSelector(term, title, options, settings).run(), settings
    )
