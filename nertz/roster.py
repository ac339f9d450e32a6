"""Roster management: adding and removing players before the game starts."""

import logging

from .errors import RosterIndexError, StateError
from .models import GameState, Player

logger = logging.getLogger('nertz.roster')


def _require_not_started(state: GameState, action: str) -> None:
    if state.started:
        raise StateError(f'Cannot {action} once the game has started')


def add_player(state: GameState, name: str) -> Player | None:
    """
    Append a player to the roster.

    An empty name is ignored; any other name is stored exactly as given.
    Duplicate names are allowed. The new player's
    id is the roster length at the time of the call, so ids are not unique
    after a removal; players are always addressed by position.

    Args:
        state: Game to modify
        name: Display name

    Returns:
        The new Player, or None if the name was empty

    Raises:
        StateError: If the game has started
    """
    _require_not_started(state, 'add players')

    if not name:
        logger.debug('Ignoring empty player name')
        return None

    player = Player(id=len(state.players), name=name)
    state.players.append(player)
    logger.info(f'Added player {player.name!r} (id {player.id})')
    return player


def remove_player(state: GameState, index: int) -> Player:
    """
    Remove the player at a roster position.

    Remaining players keep their ids.

    Raises:
        StateError: If the game has started
        RosterIndexError: If index is not a valid position
    """
    _require_not_started(state, 'remove players')

    if not 0 <= index < len(state.players):
        raise RosterIndexError(index, len(state.players))

    player = state.players.pop(index)
    logger.info(f'Removed player {player.name!r} from position {index}')
    return player
