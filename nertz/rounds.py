"""Round engine: starting games, entering scores, and advancing rounds."""

import logging

from .constants import MIN_PLAYERS, SCORE_MAX, SCORE_MIN
from .cursor import clear_editing, first_unfilled, set_editing
from .errors import PreconditionError, ScoreIndexError, ScoreValueError, StateError
from .models import GameState, Round

logger = logging.getLogger('nertz.rounds')


def is_round_complete(rnd: Round) -> bool:
    """True when every player has a score for the round."""
    return all(cell.filled for cell in rnd.cells)


def append_round(state: GameState) -> int:
    """Append an empty round sized to the roster and return its index."""
    state.rounds.append(Round.empty(len(state.players)))
    index = len(state.rounds) - 1
    logger.debug(f'Opened round {index}')
    return index


def start_game(state: GameState, min_players: int = MIN_PLAYERS) -> None:
    """
    Freeze the roster, open round 0, and focus its first cell.

    Raises:
        StateError: If the game is already running
        PreconditionError: If fewer than min_players are registered
    """
    if state.started:
        raise StateError('Game has already started')
    if len(state.players) < min_players:
        raise PreconditionError(
            f'Need at least {min_players} players to start, have {len(state.players)}'
        )

    state.started = True
    state.rounds = []
    append_round(state)
    set_editing(state, 0, 0)
    logger.info(f'Game started with {len(state.players)} players')


def _validate_value(value) -> None:
    # bool is an int subclass but never a score
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScoreValueError(f'Score must be an integer, got {value!r}')
    if not SCORE_MIN <= value <= SCORE_MAX:
        raise ScoreValueError(f'Score {value} outside {SCORE_MIN}..{SCORE_MAX}')


def _advance(state: GameState, round_index: int, player_index: int) -> tuple[int, int]:
    rnd = state.rounds[round_index]
    for p in range(player_index + 1, len(rnd)):
        if not rnd.cells[p].filled:
            return set_editing(state, round_index, p)

    if is_round_complete(state.rounds[-1]):
        logger.info(f'Round {len(state.rounds) - 1} complete')
        return set_editing(state, append_round(state), 0)

    # Re-entry into an earlier cell: resume at the first gap
    r, p = first_unfilled(state)
    return set_editing(state, r, p)


def enter_score(state: GameState, round_index: int, player_index: int, value: int) -> tuple[int, int]:
    """
    Record a score and move the cursor to the next cell to fill.

    The cursor goes to the first unfilled cell after player_index in the
    same round. When there is none and the last round is full, a new round
    is appended and its first cell focused. Otherwise (a correction of an
    earlier cell) the cursor resumes at the first unfilled cell in
    round-major order.

    Args:
        state: Game to modify
        round_index: Round position
        player_index: Player position
        value: Score for the round

    Returns:
        (round, player) of the newly focused cell

    Raises:
        StateError: If the game has not started
        ScoreIndexError: If the cell does not exist
        ScoreValueError: If value is not a storable integer
    """
    if not state.started:
        raise StateError('Game has not started')
    if not state.has_cell(round_index, player_index):
        raise ScoreIndexError(round_index, player_index)
    _validate_value(value)

    clear_editing(state)
    cell = state.cell(round_index, player_index)
    cell.value = value
    logger.debug(f'Round {round_index}, player {player_index}: {value}')

    return _advance(state, round_index, player_index)


def new_game(state: GameState) -> None:
    """Clear all rounds and unfreeze the roster. Players and target score are kept."""
    state.rounds = []
    state.started = False
    logger.info('New game')


def player_totals(state: GameState) -> list[int]:
    """Cumulative score per roster position, counting only filled cells."""
    totals = [0] * len(state.players)
    for _, p, cell in state.iter_cells():
        if cell.filled and p < len(totals):
            totals[p] += cell.value
    return totals


def leaders(state: GameState) -> list[int]:
    """Roster positions sharing the highest total. Empty before any score."""
    if not any(cell.filled for _, _, cell in state.iter_cells()):
        return []
    totals = player_totals(state)
    best = max(totals)
    return [i for i, total in enumerate(totals) if total == best]
