"""Consistency checks for game state."""

from .models import GameState


def validate_state(state: GameState) -> list[str]:
    """
    Check a game against the score grid rules.

    Checks:
    - An unstarted game has no rounds
    - A started game has at least one round and one player
    - Every round has one cell per player
    - At most one cell is being edited

    Args:
        state: GameState to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if not state.started and state.rounds:
        errors.append(f'Game not started but has {len(state.rounds)} rounds')

    if state.started and not state.rounds:
        errors.append('Game started but has no rounds')

    if state.started and not state.players:
        errors.append('Game started with no players')

    width = len(state.players)
    for i, rnd in enumerate(state.rounds):
        if len(rnd) != width:
            errors.append(f'Round {i} has {len(rnd)} scores for {width} players')

    editing = [(r, p) for r, p, cell in state.iter_cells() if cell.editing]
    if len(editing) > 1:
        cells = ', '.join(f'({r}, {p})' for r, p in editing)
        errors.append(f'{len(editing)} cells marked editing: {cells}')

    return errors
