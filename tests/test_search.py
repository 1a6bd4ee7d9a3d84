import pytest

from consolemenu.search import (
    HEADER_ROWS,
    Phase,
    Redraw,
    SearchState,
    advance,
    find_first,
    is_prefix,
)
from consolemenu.terminal import Key

FRUIT = ["Apple", "Apricot", "Banana"]
XYZ = ["X", "Y", "Z"]


def feed(options, keys, state=None):
    state = state or SearchState()
    step = None
    for key in keys:
        step = advance(state, options, key)
        state = step.state
    return state, step


class TestPrefix:
    def test_is_prefix_ignores_case(self):
        assert is_prefix("Apricot", "aPR")

    def test_option_shorter_than_term_is_not_a_prefix(self):
        assert not is_prefix("Ap", "app")

    def test_find_first_prefers_list_order(self):
        assert find_first(FRUIT, "ap") == 0
        assert find_first(FRUIT, "apr") == 1

    def test_find_first_without_match(self):
        assert find_first(FRUIT, "q") is None


class TestTyping:
    def test_first_character_starts_matching(self):
        state, step = feed(FRUIT, ["b"])
        assert state == SearchState(term="b", match=2, phase=Phase.MATCHING)
        assert step.redraw is Redraw.HIGHLIGHT

    def test_first_character_is_case_insensitive(self):
        state, _ = feed(FRUIT, ["B"])
        assert state.match == 2
        assert state.term == "B"

    def test_unmatched_first_character_is_dropped(self):
        state, step = feed(FRUIT, ["q"])
        assert state == SearchState()
        assert step.redraw is Redraw.NONE

    def test_fruit_scenario(self):
        state, step = feed(FRUIT, ["a"])
        assert state.match == 0

        state, step = feed(FRUIT, ["p"], state)
        assert (state.term, state.match) == ("ap", 0)
        assert step.redraw is Redraw.HIGHLIGHT

        state, step = feed(FRUIT, ["r"], state)
        assert (state.term, state.match) == ("apr", 1)
        assert step.redraw is Redraw.FULL

        state, _ = feed(FRUIT, [Key.ENTER], state)
        assert state.phase is Phase.CONFIRMED
        assert state.match == 1

    def test_full_spelling_ends_on_that_option(self):
        state, _ = feed(FRUIT, list("BANANA"))
        assert state.phase is Phase.MATCHING
        assert state.match == 2
        assert len(state.term) == len("Banana")

    def test_rescan_starts_from_the_top(self):
        options = ["cab", "abc", "abd", "cat"]
        state, _ = feed(options, list("cat"))
        assert state.match == 3
        state, _ = feed(options, [Key.BACKSPACE, Key.BACKSPACE], state)
        assert (state.term, state.match) == ("c", 3)
        state, _ = feed(options, ["a", "b"], state)
        assert state.match == 0

    @pytest.mark.parametrize("keys", [["a", "z"], ["a", "p", "p", "l", "e", "s"]])
    def test_unmatchable_character_is_rejected(self, keys):
        before, _ = feed(FRUIT, keys[:-1])
        after, step = feed(FRUIT, keys[-1:], before)
        assert after == before
        assert step.redraw is Redraw.REJECT
        assert step.rejected == keys[-1]

    def test_non_printable_strings_are_ignored(self):
        state, step = feed(FRUIT, ["\t"])
        assert state == SearchState()
        assert step.redraw is Redraw.NONE

    def test_other_keys_are_ignored(self):
        before, _ = feed(FRUIT, ["a"])
        after, step = feed(FRUIT, [Key.OTHER], before)
        assert after == before
        assert step.redraw is Redraw.NONE


class TestBackspace:
    @pytest.mark.parametrize(
        "keys",
        [
            ["a"],
            ["a", "p", "r"],
            [Key.DOWN, Key.DOWN],
            ["b", Key.UP],
        ],
    )
    def test_backspacing_everything_returns_to_empty(self, keys):
        state, _ = feed(FRUIT, keys)
        step = None
        while state.term:
            step = advance(state, FRUIT, Key.BACKSPACE)
            state = step.state
        assert state == SearchState()
        assert step.redraw is Redraw.FULL

    def test_backspace_keeps_the_match(self):
        state, _ = feed(FRUIT, ["a", "p", "r", Key.BACKSPACE])
        assert (state.term, state.match) == ("ap", 1)

    def test_backspace_when_empty_does_nothing(self):
        state, step = feed(FRUIT, [Key.BACKSPACE])
        assert state == SearchState()
        assert step.redraw is Redraw.NONE


class TestArrows:
    def test_xyz_scenario(self):
        state, step = feed(XYZ, [Key.DOWN])
        assert (state.match, state.term, state.row) == (0, "X", HEADER_ROWS)
        assert step.previous_row is None

        state, step = feed(XYZ, [Key.DOWN], state)
        assert (state.match, state.term) == (1, "Y")
        assert step.previous_row == HEADER_ROWS

        state, _ = feed(XYZ, [Key.UP], state)
        assert state.match == 0

        state, step = feed(XYZ, [Key.UP], state)
        assert state.match == 0
        assert step.redraw is Redraw.NONE

    def test_up_starts_at_the_first_option(self):
        state, _ = feed(XYZ, [Key.UP])
        assert state.match == 0

    def test_down_stops_at_the_last_option(self):
        state, step = feed(XYZ, [Key.DOWN] * 5)
        assert state.match == 2
        assert step.redraw is Redraw.NONE

    def test_single_option_never_moves(self):
        state, _ = feed(["only"], [Key.DOWN, Key.DOWN, Key.UP])
        assert state.match == 0

    def test_arrow_replaces_the_typed_term(self):
        state, _ = feed(FRUIT, ["a", Key.DOWN])
        assert (state.term, state.match) == ("Apricot", 1)

    def test_row_follows_the_match(self):
        state = SearchState()
        for key in ["b", Key.UP, Key.UP, "a", "p", "r", Key.DOWN]:
            state = advance(state, FRUIT, key).state
            assert state.row == HEADER_ROWS + state.match


class TestEnter:
    def test_enter_without_term_is_ignored(self):
        state, step = feed(FRUIT, [Key.ENTER])
        assert state.phase is Phase.EMPTY
        assert step.redraw is Redraw.NONE

    def test_enter_after_arrow_confirms(self):
        state, _ = feed(XYZ, [Key.DOWN, Key.DOWN, Key.ENTER])
        assert state.phase is Phase.CONFIRMED
        assert state.match == 1

    def test_confirmed_state_ignores_further_keys(self):
        state, _ = feed(FRUIT, ["b", Key.ENTER])
        after, step = feed(FRUIT, [Key.BACKSPACE, "a"], state)
        assert after == state
        assert step.redraw is Redraw.NONE

    def test_empty_option_is_only_reachable_with_arrows(self):
        options = ["", "b"]
        state, _ = feed(options, ["x"])
        assert state.match is None
        state, _ = feed(options, [Key.DOWN, Key.ENTER])
        assert state.phase is Phase.CONFIRMED
        assert state.match == 0
