"""
Game controller: owns the game, applies commands, persists, and exposes a
read-only view.

Every command is validated before the game is touched. A successful
mutation is saved before the view is returned; a failed save raises
PersistenceSaveError with the mutation already applied in memory.
"""

import logging
from dataclasses import dataclass, replace

from .config import TrackerConfig
from .constants import DEFAULT_TARGET_SCORE, MIN_PLAYERS, STORAGE_KEY
from .cursor import find_focused, set_editing
from .errors import StateError, ValidationError
from .models import GameState, Player
from .roster import add_player, remove_player
from .rounds import enter_score, leaders, new_game, player_totals, start_game
from .storage import JsonFileStore, KeyValueStore, load_state_safe, save_state

logger = logging.getLogger('nertz.controller')


# ============ Commands ============

@dataclass(frozen=True)
class AddPlayer:
    name: str


@dataclass(frozen=True)
class RemovePlayer:
    index: int


@dataclass(frozen=True)
class StartGame:
    pass


@dataclass(frozen=True)
class NewGame:
    pass


@dataclass(frozen=True)
class EnterScore:
    round: int
    player: int
    value: int


@dataclass(frozen=True)
class SetEditing:
    round: int
    player: int


Command = AddPlayer | RemovePlayer | StartGame | NewGame | EnterScore | SetEditing


# ============ Read model ============

@dataclass(frozen=True)
class GameView:
    """Snapshot of the game for rendering. ``focused`` is None when no cell is editing."""
    players: tuple[Player, ...]
    rounds: tuple[tuple[int | None, ...], ...]
    started: bool
    target_score: int
    focused: tuple[int, int] | None
    totals: tuple[int, ...]
    leaders: tuple[int, ...]

    @classmethod
    def from_state(cls, state: GameState) -> 'GameView':
        return cls(
            players=tuple(replace(p) for p in state.players),
            rounds=tuple(tuple(c.value for c in rnd.cells) for rnd in state.rounds),
            started=state.started,
            target_score=state.target_score,
            focused=find_focused(state),
            totals=tuple(player_totals(state)),
            leaders=tuple(leaders(state)),
        )


class GameController:
    """
    Single owner of a GameState.

    The game is loaded from the store on construction (a fresh game on any
    load error) and flushed on close(). Use as a context manager to flush
    on exit.

    Args:
        store: Key-value store holding the saved game
        key: Storage key
        min_players: Fewest players that can start a game
        target_score: Target for a fresh game; a loaded game keeps its own

    Raises:
        ValidationError: If min_players or target_score is below 1
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = STORAGE_KEY,
        min_players: int = MIN_PLAYERS,
        target_score: int = DEFAULT_TARGET_SCORE,
    ):
        if target_score < 1:
            raise ValidationError(f'Target score must be at least 1, got {target_score}')
        if min_players < 1:
            raise ValidationError(f'Minimum players must be at least 1, got {min_players}')

        self.store = store
        self.key = key
        self.min_players = min_players
        self._state = load_state_safe(store, key, target_score=target_score)
        self._closed = False

    @classmethod
    def from_config(cls, config: TrackerConfig) -> 'GameController':
        return cls(
            JsonFileStore(config.state_path),
            key=config.storage_key,
            min_players=config.min_players,
            target_score=config.target_score,
        )

    def dispatch(self, command: Command) -> GameView:
        """
        Apply one command, save, and return the new view.

        Raises:
            ValidationError, PreconditionError: Command rejected, game unchanged
            StateError: The controller has been closed
            PersistenceSaveError: Game changed in memory but not saved
            TypeError: Unknown command
        """
        if self._closed:
            raise StateError('Game controller is closed')

        state = self._state
        if isinstance(command, AddPlayer):
            add_player(state, command.name)
        elif isinstance(command, RemovePlayer):
            remove_player(state, command.index)
        elif isinstance(command, StartGame):
            start_game(state, self.min_players)
        elif isinstance(command, NewGame):
            new_game(state)
        elif isinstance(command, EnterScore):
            enter_score(state, command.round, command.player, command.value)
        elif isinstance(command, SetEditing):
            set_editing(state, command.round, command.player)
        else:
            raise TypeError(f'Unknown command: {command!r}')

        logger.debug(f'Applied {command!r}')
        self.save()
        return self.view()

    def view(self) -> GameView:
        return GameView.from_state(self._state)

    def save(self) -> None:
        save_state(self.store, self.key, self._state)

    def close(self) -> None:
        """Flush the game to the store. Safe to call more than once."""
        if self._closed:
            return
        self.save()
        self._closed = True

    def __enter__(self) -> 'GameController':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
