"""Unit tests for game state validation."""

from nertz.models import GameState, Player, Round, ScoreCell
from nertz.validators import validate_state


def players(n):
    return [Player(id=i, name=f'P{i}') for i in range(n)]


class TestStateValidation:
    """Tests for state invariant checks."""

    def test_fresh_state_valid(self):
        """Test an empty unstarted game passes."""
        assert validate_state(GameState()) == []

    def test_valid_started_game(self):
        """Test a started game with one focused cell passes."""
        state = GameState(
            players=players(2),
            rounds=[Round(cells=[ScoreCell(value=3), ScoreCell(editing=True)])],
            started=True,
        )
        assert validate_state(state) == []

    def test_rounds_before_start(self):
        """Test an unstarted game may not hold rounds."""
        state = GameState(players=players(2), rounds=[Round.empty(2)])
        errors = validate_state(state)
        assert len(errors) == 1
        assert 'not started' in errors[0]

    def test_started_without_rounds(self):
        """Test a started game needs a round."""
        errors = validate_state(GameState(players=players(2), started=True))
        assert errors == ['Game started but has no rounds']

    def test_started_without_players(self):
        """Test a started game needs players."""
        state = GameState(rounds=[Round.empty(0)], started=True)
        assert 'Game started with no players' in validate_state(state)

    def test_round_width_mismatch(self):
        """Test each round must have one cell per player."""
        state = GameState(
            players=players(3),
            rounds=[Round.empty(3), Round.empty(2)],
            started=True,
        )
        errors = validate_state(state)
        assert errors == ['Round 1 has 2 scores for 3 players']

    def test_multiple_editing_cells(self):
        """Test more than one editing cell is reported with coordinates."""
        state = GameState(
            players=players(2),
            rounds=[Round(cells=[ScoreCell(editing=True), ScoreCell(editing=True)])],
            started=True,
        )
        errors = validate_state(state)
        assert len(errors) == 1
        assert '(0, 0), (0, 1)' in errors[0]
