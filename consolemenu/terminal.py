import curses
import logging
from enum import Enum, auto
from typing import Callable, Protocol, TypeVar

from .config import Settings, load_config

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Key(Enum):
    ENTER = auto()
    BACKSPACE = auto()
    UP = auto()
    DOWN = auto()
    OTHER = auto()  # any special key the selectors don't react to


class Color(Enum):
    DEFAULT = auto()  # gray
    HIGHLIGHT = auto()  # green
    MUTED_HIGHLIGHT = auto()  # dark green
    MUTED = auto()  # dark gray
    ALERT = auto()  # red


class Terminal(Protocol):
    """the screen and keyboard surface the selectors draw on"""

    @property
    def width(self) -> int: ...

    def read_key(self) -> str | Key: ...

    def move(self, row: int, col: int) -> None: ...

    def clear(self) -> None: ...

    def clear_line(self) -> None: ...

    def write(self, text: str) -> None: ...

    def set_color(self, color: Color) -> None: ...

    def set_cursor_visible(self, visible: bool) -> None: ...

    def refresh(self) -> None: ...


_ENTER_CODES = {"\n", "\r", curses.KEY_ENTER}
_BACKSPACE_CODES = {"\b", "\x7f", curses.KEY_BACKSPACE}
_ARROWS = {curses.KEY_UP: Key.UP, curses.KEY_DOWN: Key.DOWN}


def decode_key(raw: str | int) -> str | Key:
    """maps a value returned by get_wch() to a character or a named key"""
    if raw in _ENTER_CODES:
        return Key.ENTER
    if raw in _BACKSPACE_CODES:
        return Key.BACKSPACE
    if isinstance(raw, int):
        return _ARROWS.get(raw, Key.OTHER)
    if raw.isprintable():
        return raw
    return Key.OTHER


_COLOR_NUMBERS = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}


class CursesTerminal:
    """Terminal implementation on top of a curses window."""

    def __init__(self, stdscr, settings: Settings | None = None):
        self.stdscr = stdscr
        self.settings = settings or load_config()
        # set by move() when the target cell is outside the window
        self._offscreen = False
        self.stdscr.keypad(True)
        self._init_colors()
        self._attr = self._attrs[Color.DEFAULT]

    def _init_colors(self):
        """Initialize color pairs."""
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_WHITE, -1)
            curses.init_pair(2, _COLOR_NUMBERS[self.settings.highlight_color], -1)
            curses.init_pair(3, _COLOR_NUMBERS[self.settings.alert_color], -1)
            default, highlight, alert = (curses.color_pair(n) for n in (1, 2, 3))
        except curses.error:
            # monochrome terminal, fall back to attributes only
            logger.debug("terminal has no color support")
            default = highlight = alert = curses.A_NORMAL

        self._attrs = {
            Color.DEFAULT: default,
            Color.MUTED: default | curses.A_DIM,
            Color.HIGHLIGHT: highlight | curses.A_BOLD,
            Color.MUTED_HIGHLIGHT: highlight,
            Color.ALERT: alert | curses.A_BOLD,
        }

    @property
    def width(self) -> int:
        return self.stdscr.getmaxyx()[1]

    def read_key(self) -> str | Key:
        while True:
            try:
                raw = self.stdscr.get_wch()
            except curses.error:
                # interrupted read, e.g. by a resize signal
                continue
            if raw == curses.KEY_RESIZE:
                continue
            return decode_key(raw)

    def move(self, row: int, col: int) -> None:
        """moves the cursor, writes are dropped until it is back on screen"""
        height, width = self.stdscr.getmaxyx()
        self._offscreen = not (0 <= row < height and 0 <= col < width)
        if not self._offscreen:
            self.stdscr.move(row, col)

    def clear(self) -> None:
        self.stdscr.erase()
        self.stdscr.move(0, 0)
        self._offscreen = False

    def clear_line(self) -> None:
        if not self._offscreen:
            self.stdscr.clrtoeol()

    def write(self, text: str) -> None:
        """writes at the cursor, clipping to the right edge of the screen"""
        if self._offscreen:
            return
        height, width = self.stdscr.getmaxyx()
        y, x = self.stdscr.getyx()
        text = text[: max(width - x, 0)]
        # avoid writing to bottom-right corner (causes scroll)
        if y == height - 1 and x + len(text) >= width:
            text = text[: width - x - 1]
        if not text:
            return
        try:
            self.stdscr.addstr(text, self._attr)
        except curses.error:
            pass  # ignore edge case errors

    def set_color(self, color: Color) -> None:
        self._attr = self._attrs[color]

    def set_cursor_visible(self, visible: bool) -> None:
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            pass  # terminal can't change cursor visibility

    def refresh(self) -> None:
        self.stdscr.refresh()


def run_in_terminal(
    func: Callable[[CursesTerminal], T], settings: Settings | None = None
) -> T:
    """runs func against the real terminal, restoring it afterwards"""

    def main_loop(stdscr) -> T:
        return func(CursesTerminal(stdscr, settings))

    return curses.wrapper(main_loop)
