import time
from typing import Sequence

from .config import Settings
from .search import HEADER_ROWS, Redraw, SearchState, Step
from .terminal import Color, Terminal


class ListRenderer:
    """draws the list selector and applies the redraw of each step"""

    def __init__(
        self,
        terminal: Terminal,
        title: str,
        options: Sequence[str],
        settings: Settings,
    ):
        self.terminal = terminal
        self.title = title
        self.options = options
        self.settings = settings

    def apply(self, step: Step) -> None:
        state = step.state
        if step.redraw is Redraw.FULL:
            self.draw_list()
            if state.match is not None:
                self.draw_highlight(state)
        elif step.redraw is Redraw.HIGHLIGHT:
            if step.previous_row is not None:
                self.draw_plain(step.previous_row)
            self.draw_highlight(state)
        elif step.redraw is Redraw.REJECT:
            self.flash(state, step.rejected)
            self.draw_highlight(state)
        self.park_cursor(state)

    def draw_list(self) -> None:
        """clears the screen and writes the title and every option"""
        t = self.terminal
        t.clear()
        t.set_color(Color.DEFAULT)
        t.move(0, 0)
        t.write(self.title)
        t.move(HEADER_ROWS - 1, 0)
        t.write(self.settings.rule)
        for i, option in enumerate(self.options):
            t.move(HEADER_ROWS + i, 0)
            t.write(option)
        t.move(HEADER_ROWS + len(self.options), 0)
        t.write(self.settings.rule)

    def draw_plain(self, row: int) -> None:
        t = self.terminal
        t.set_color(Color.DEFAULT)
        t.move(row, 0)
        t.write(self.options[row - HEADER_ROWS])

    def draw_highlight(self, state: SearchState) -> None:
        """Two-tone rendering of the match.

        The part covered by the term goes first, then the rest of the option
        in the muted variant, both next to the title and on the option's row.
        """
        assert state.match is not None
        option = self.options[state.match]
        typed, rest = option[: len(state.term)], option[len(state.term) :]
        t = self.terminal

        t.set_color(Color.DEFAULT)
        t.move(0, 0)
        t.write(self.title)
        t.clear_line()
        t.write(typed)
        t.set_color(Color.MUTED)
        t.write(rest)

        t.set_color(Color.HIGHLIGHT)
        t.move(state.row, 0)
        t.write(typed)
        t.set_color(Color.MUTED_HIGHLIGHT)
        t.write(rest)

    def flash(self, state: SearchState, char: str) -> None:
        t = self.terminal
        col = len(self.title) + len(state.term)
        if col >= t.width:
            # off screen, nothing to flash
            return
        t.set_color(Color.ALERT)
        t.move(0, col)
        t.write(char)
        t.refresh()
        time.sleep(self.settings.flash_ms / 1000)

    def park_cursor(self, state: SearchState) -> None:
        """leaves the cursor where the next typed character goes"""
        self.terminal.set_color(Color.DEFAULT)
        self.terminal.move(0, len(self.title) + len(state.term))
        self.terminal.refresh()
