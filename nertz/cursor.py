"""The editing cursor: which single score cell currently accepts input."""

from .constants import DEFAULT_FOCUS
from .errors import ScoreIndexError
from .models import GameState


def find_focused(state: GameState) -> tuple[int, int] | None:
    """Return (round, player) of the editing cell, or None if no cell is editing."""
    for r, p, cell in state.iter_cells():
        if cell.editing:
            return r, p
    return None


def get_focused(state: GameState) -> tuple[int, int]:
    """
    Return (round, player) of the editing cell.

    Falls back to DEFAULT_FOCUS, (0, 0), when no cell is editing. That
    coordinate only names a real cell once round 0 exists.
    """
    focused = find_focused(state)
    return focused if focused is not None else DEFAULT_FOCUS


def clear_editing(state: GameState) -> None:
    for _, _, cell in state.iter_cells():
        cell.editing = False


def set_editing(state: GameState, round_index: int, player_index: int) -> tuple[int, int]:
    """
    Move the cursor to a cell, leaving every score value untouched.

    Raises:
        ScoreIndexError: If the coordinates are outside the score grid
    """
    if not state.has_cell(round_index, player_index):
        raise ScoreIndexError(round_index, player_index)

    clear_editing(state)
    state.cell(round_index, player_index).editing = True
    return round_index, player_index


def first_unfilled(state: GameState) -> tuple[int, int] | None:
    """First cell without a value in round-major order."""
    for r, p, cell in state.iter_cells():
        if not cell.filled:
            return r, p
    return None
