"""Incremental search over a list of options.

Everything in here is pure: ``advance`` takes the current state and one key
event and returns the next state together with a description of what has to
be redrawn. Drawing is left to ``render.ListRenderer``.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Sequence

from .terminal import Key

logger = logging.getLogger(__name__)

# title row, blank row and the rule above the first option
HEADER_ROWS = 3


class Phase(Enum):
    EMPTY = auto()
    MATCHING = auto()
    CONFIRMED = auto()


class Redraw(Enum):
    NONE = auto()
    HIGHLIGHT = auto()  # header row and the row of the match
    FULL = auto()  # whole list, then the highlight if there is a match
    REJECT = auto()  # flash the rejected character, then the highlight


@dataclass(frozen=True)
class SearchState:
    """State of one list selection.

    ``match`` is the index of the highlighted option. The term is always a
    case-insensitive prefix of that option while matching.
    """

    term: str = ""
    match: Optional[int] = None
    phase: Phase = Phase.EMPTY

    @property
    def row(self) -> int:
        """screen row of the match"""
        if self.match is None:
            return HEADER_ROWS
        return HEADER_ROWS + self.match


@dataclass(frozen=True)
class Step:
    """Result of feeding one key to ``advance``."""

    state: SearchState
    redraw: Redraw = Redraw.NONE
    # row to repaint without highlight before highlighting the new match
    previous_row: Optional[int] = None
    rejected: str = ""


def is_prefix(option: str, term: str) -> bool:
    """case-insensitive check that option starts with term"""
    return option[: len(term)].lower() == term.lower()


def find_first(options: Sequence[str], term: str) -> Optional[int]:
    """index of the first option starting with term, in list order"""
    for index, option in enumerate(options):
        if is_prefix(option, term):
            return index
    return None


def advance(state: SearchState, options: Sequence[str], key: str | Key) -> Step:
    """applies one key event to the search state"""
    if state.phase is Phase.CONFIRMED:
        return Step(state)
    if key is Key.ENTER:
        return _confirm(state)
    if key is Key.BACKSPACE:
        return _backspace(state)
    if key is Key.UP or key is Key.DOWN:
        return _navigate(state, options, key)
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        if state.phase is Phase.EMPTY:
            return _start(state, options, key)
        return _extend(state, options, key)
    return Step(state)


def _confirm(state: SearchState) -> Step:
    if state.match is None:
        return Step(state)
    logger.debug("confirmed option %d", state.match)
    return Step(replace(state, phase=Phase.CONFIRMED))


def _backspace(state: SearchState) -> Step:
    if state.phase is not Phase.MATCHING or not state.term:
        return Step(state)

    term = state.term[:-1]
    if not term:
        return Step(SearchState(), Redraw.FULL)
    # the match never changes when the term gets shorter
    return Step(replace(state, term=term), Redraw.HIGHLIGHT)


def _start(state: SearchState, options: Sequence[str], char: str) -> Step:
    # empty options can't be matched by their first character
    for index, option in enumerate(options):
        if option[:1].lower() == char.lower():
            logger.debug("'%s' starts a search at option %d", char, index)
            return Step(
                SearchState(term=char, match=index, phase=Phase.MATCHING),
                Redraw.HIGHLIGHT,
            )
    logger.debug("no option starts with '%s'", char)
    return Step(state)


def _extend(state: SearchState, options: Sequence[str], char: str) -> Step:
    assert state.match is not None
    term = state.term + char
    if is_prefix(options[state.match], term):
        return Step(replace(state, term=term), Redraw.HIGHLIGHT)

    # restart the scan from the top of the list, not from the old match
    index = find_first(options, term)
    if index is None:
        logger.debug("rejected '%s', no option starts with %r", char, term)
        return Step(state, Redraw.REJECT, rejected=char)
    logger.debug("%r moved the match from %d to %d", term, state.match, index)
    return Step(replace(state, term=term, match=index), Redraw.FULL)


def _navigate(state: SearchState, options: Sequence[str], key: Key) -> Step:
    if state.match is None:
        return Step(
            SearchState(term=options[0], match=0, phase=Phase.MATCHING),
            Redraw.HIGHLIGHT,
        )

    index = state.match - 1 if key is Key.UP else state.match + 1
    if not 0 <= index < len(options):
        return Step(state)
    return Step(
        SearchState(term=options[index], match=index, phase=Phase.MATCHING),
        Redraw.HIGHLIGHT,
        previous_row=state.row,
    )
