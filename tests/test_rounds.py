"""Unit tests for the round engine."""

import pytest

from nertz.cursor import find_focused
from nertz.errors import (
    PreconditionError,
    ScoreIndexError,
    ScoreValueError,
    StateError,
    ValidationError,
)
from nertz.models import GameState, Player
from nertz.rounds import (
    enter_score,
    is_round_complete,
    leaders,
    new_game,
    player_totals,
    start_game,
)
from nertz.cursor import set_editing


def game_of(*names, target_score=100):
    state = GameState(
        players=[Player(id=i, name=n) for i, n in enumerate(names)],
        target_score=target_score,
    )
    start_game(state)
    return state


def grid(state):
    return [[(c.value, c.editing) for c in rnd.cells] for rnd in state.rounds]


def editing_count(state):
    return sum(1 for _, _, c in state.iter_cells() if c.editing)


class TestStartGame:
    """Tests for starting a game."""

    def test_creates_single_round_with_first_cell_editing(self):
        """Test N players yields one round of N cells, cell 0 editing."""
        state = game_of('Max', 'Bella', 'Sam')
        assert state.started
        assert grid(state) == [[(None, True), (None, False), (None, False)]]

    def test_requires_two_players(self):
        """Test starting with one player fails without mutation."""
        state = GameState(players=[Player(id=0, name='Max')])
        with pytest.raises(PreconditionError):
            start_game(state)
        assert not state.started
        assert state.rounds == []

    def test_empty_roster_rejected(self):
        """Test starting with no players fails."""
        with pytest.raises(PreconditionError):
            start_game(GameState())

    def test_custom_minimum(self):
        """Test the minimum roster size is configurable."""
        state = GameState(players=[Player(id=i, name=n) for i, n in enumerate('ABC')])
        with pytest.raises(PreconditionError):
            start_game(state, min_players=4)

    def test_start_twice_rejected(self):
        """Test an already started game cannot be restarted."""
        state = game_of('Max', 'Bella')
        with pytest.raises(StateError):
            start_game(state)
        assert len(state.rounds) == 1


class TestEnterScore:
    """Tests for score entry and cursor advancement."""

    def test_max_and_bella_scenario(self):
        """Test the two-player fill sequence opens round 1 after round 0 fills."""
        state = game_of('Max', 'Bella')

        enter_score(state, 0, 0, 10)
        assert grid(state) == [[(10, False), (None, True)]]

        focus = enter_score(state, 0, 1, -5)
        assert focus == (1, 0)
        assert grid(state) == [
            [(10, False), (-5, False)],
            [(None, True), (None, False)],
        ]

    def test_before_start_raises_state_error(self):
        """Test scores cannot be entered before the game starts."""
        state = GameState(players=[Player(id=0, name='Max'), Player(id=1, name='Bella')])
        with pytest.raises(StateError):
            enter_score(state, 0, 0, 10)

    @pytest.mark.parametrize('r,p', [(1, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_range_raises_index_error(self, r, p):
        """Test invalid coordinates fail without touching the grid."""
        state = game_of('Max', 'Bella')
        before = grid(state)
        with pytest.raises(IndexError):
            enter_score(state, r, p, 3)
        with pytest.raises(ScoreIndexError):
            enter_score(state, r, p, 3)
        assert grid(state) == before

    @pytest.mark.parametrize('value', [128, -129, 1.5, '7', True, None])
    def test_bad_values_rejected(self, value):
        """Test non-integers and values outside the signed byte range are rejected."""
        state = game_of('Max', 'Bella')
        with pytest.raises(ScoreValueError):
            enter_score(state, 0, 0, value)
        assert grid(state) == [[(None, True), (None, False)]]

    def test_score_value_error_is_validation_error(self):
        """Test value errors belong to the validation family."""
        assert issubclass(ScoreValueError, ValidationError)

    def test_range_bounds_accepted(self):
        """Test the extremes of the range are storable."""
        state = game_of('Max', 'Bella')
        enter_score(state, 0, 0, -128)
        enter_score(state, 0, 1, 127)
        assert player_totals(state) == [-128, 127]

    def test_single_editing_cell_after_every_entry(self):
        """Test exactly one cell is editing after each entry of a long game."""
        state = game_of('A', 'B', 'C')
        for i in range(12):
            r, p = find_focused(state)
            enter_score(state, r, p, i)
            assert editing_count(state) == 1
        assert len(state.rounds) == 5
        assert all(len(rnd) == 3 for rnd in state.rounds)

    def test_entry_out_of_order_clears_previous_cursor(self):
        """Test scoring a cell other than the focused one leaves one editing cell."""
        state = game_of('A', 'B', 'C')
        enter_score(state, 0, 2, 4)
        assert editing_count(state) == 1
        assert find_focused(state) == (0, 0)

    def test_skips_filled_cells(self):
        """Test the cursor moves to the first unfilled cell after the entry point."""
        state = game_of('A', 'B', 'C', 'D')
        enter_score(state, 0, 0, 1)
        enter_score(state, 0, 1, 1)
        enter_score(state, 0, 3, 1)
        set_editing(state, 0, 0)
        enter_score(state, 0, 0, 5)
        assert find_focused(state) == (0, 2)

    def test_correction_in_earlier_round_resumes_at_live_round(self):
        """Test re-entering a past score does not open a new round."""
        state = game_of('Max', 'Bella')
        enter_score(state, 0, 0, 10)
        enter_score(state, 0, 1, 3)
        enter_score(state, 1, 0, 7)

        set_editing(state, 0, 1)
        focus = enter_score(state, 0, 1, 4)

        assert focus == (1, 1)
        assert len(state.rounds) == 2
        assert state.cell(0, 1).value == 4

    def test_correction_of_full_round_returns_to_open_round(self):
        """Test correcting a finished round sends the cursor back to the open round."""
        state = game_of('Max', 'Bella')
        enter_score(state, 0, 0, 10)
        enter_score(state, 0, 1, 3)
        enter_score(state, 1, 0, 1)
        enter_score(state, 1, 1, 2)
        assert len(state.rounds) == 3

        set_editing(state, 1, 1)
        enter_score(state, 1, 1, 9)
        assert len(state.rounds) == 3
        assert find_focused(state) == (2, 0)


class TestNewGame:
    """Tests for resetting a game."""

    def test_keeps_roster_and_target(self):
        """Test new game clears rounds but keeps players and target score."""
        state = game_of('Max', 'Bella', target_score=150)
        enter_score(state, 0, 0, 10)
        new_game(state)
        assert state.rounds == []
        assert not state.started
        assert [p.name for p in state.players] == ['Max', 'Bella']
        assert state.target_score == 150

    def test_can_start_again(self):
        """Test a reset game can be started again."""
        state = game_of('Max', 'Bella')
        new_game(state)
        start_game(state)
        assert len(state.rounds) == 1


class TestTotals:
    """Tests for running totals."""

    def test_totals_sum_filled_cells(self):
        """Test totals only count entered scores."""
        state = game_of('Max', 'Bella', 'Sam')
        enter_score(state, 0, 0, 10)
        enter_score(state, 0, 1, -5)
        enter_score(state, 0, 2, 3)
        enter_score(state, 1, 0, 20)
        assert player_totals(state) == [30, -5, 3]
        assert leaders(state) == [0]

    def test_no_leaders_before_scores(self):
        """Test nobody leads before any score."""
        assert leaders(game_of('Max', 'Bella')) == []

    def test_tied_leaders(self):
        """Test ties report every leading position."""
        state = game_of('Max', 'Bella')
        enter_score(state, 0, 0, 8)
        enter_score(state, 0, 1, 8)
        assert leaders(state) == [0, 1]

    def test_target_not_enforced(self):
        """Test passing the target score does not stop the game."""
        state = game_of('Max', 'Bella', target_score=10)
        enter_score(state, 0, 0, 50)
        enter_score(state, 0, 1, 0)
        assert state.started
        assert len(state.rounds) == 2

    def test_round_complete(self):
        """Test round completion requires every cell filled."""
        state = game_of('Max', 'Bella')
        assert not is_round_complete(state.rounds[0])
        enter_score(state, 0, 0, 1)
        enter_score(state, 0, 1, 1)
        assert is_round_complete(state.rounds[0])
