import logging
from typing import Sequence

from .config import Settings, load_config
from .render import ListRenderer
from .search import Phase, Redraw, SearchState, Step, advance
from .terminal import Color, Terminal, run_in_terminal

logger = logging.getLogger(__name__)


class ListSelector:
    """Search-as-you-type selection over a list of options.

    Typing narrows the highlight to the first option starting with the typed
    text, backspace takes characters back, the arrow keys step through the
    list and enter confirms the highlighted option.
    """

    def __init__(
        self,
        terminal: Terminal,
        title: str,
        options: Sequence[str],
        settings: Settings | None = None,
    ):
        if not options:
            raise ValueError("at least one option is required")
        self.terminal = terminal
        self.options = list(options)
        self.state = SearchState()
        self.renderer = ListRenderer(
            terminal, title, self.options, settings or load_config()
        )

    @property
    def choice(self) -> int | None:
        """index of the confirmed option, None until enter is accepted"""
        if self.state.phase is Phase.CONFIRMED:
            return self.state.match
        return None

    def feed(self, key) -> Step:
        step = advance(self.state, self.options, key)
        self.state = step.state
        if step.redraw is not Redraw.NONE:
            self.renderer.apply(step)
        return step

    def run(self) -> int:
        """blocks until an option is confirmed and returns its index"""
        try:
            self.renderer.apply(Step(self.state, Redraw.FULL))
            while self.choice is None:
                self.feed(self.terminal.read_key())
        finally:
            self.terminal.set_cursor_visible(True)
            self.terminal.set_color(Color.DEFAULT)
            self.terminal.clear()
            self.terminal.refresh()

        logger.debug("selected %r", self.options[self.choice])
        return self.choice


def show_list(
    title: str,
    options: Sequence[str],
    terminal: Terminal | None = None,
    settings: Settings | None = None,
) -> int:
    """prompts a searchable list and returns the zero-based index picked"""
    if not options:
        raise ValueError("at least one option is required")
    if terminal is not None:
        return ListSelector(terminal, title, options, settings).run()

    settings = settings or load_config()
    return run_in_terminal(
        lambda term: ListSelector(term, title, options, settings).run(), settings
    )
