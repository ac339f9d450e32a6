from .models import GameState, Player, Round, ScoreCell
from .errors import (
    NertzError,
    ValidationError,
    RosterIndexError,
    ScoreIndexError,
    ScoreValueError,
    PreconditionError,
    StateError,
    PersistenceError,
    PersistenceLoadError,
    PersistenceSaveError,
)
from .roster import add_player, remove_player
from .rounds import (
    start_game,
    enter_score,
    new_game,
    is_round_complete,
    player_totals,
    leaders,
)
from .cursor import get_focused, find_focused, set_editing, clear_editing
from .storage import (
    KeyValueStore,
    MemoryStore,
    JsonFileStore,
    load_state,
    load_state_safe,
    save_state,
)
from .controller import (
    GameController,
    GameView,
    AddPlayer,
    RemovePlayer,
    StartGame,
    NewGame,
    EnterScore,
    SetEditing,
)
from .scoresheet import render_scoresheet
from .excel_export import export_scoresheet

__all__ = [
    # Models
    'GameState',
    'Player',
    'Round',
    'ScoreCell',
    # Errors
    'NertzError',
    'ValidationError',
    'RosterIndexError',
    'ScoreIndexError',
    'ScoreValueError',
    'PreconditionError',
    'StateError',
    'PersistenceError',
    'PersistenceLoadError',
    'PersistenceSaveError',
    # Roster
    'add_player',
    'remove_player',
    # Rounds
    'start_game',
    'enter_score',
    'new_game',
    'is_round_complete',
    'player_totals',
    'leaders',
    # Cursor
    'get_focused',
    'find_focused',
    'set_editing',
    'clear_editing',
    # Persistence
    'KeyValueStore',
    'MemoryStore',
    'JsonFileStore',
    'load_state',
    'load_state_safe',
    'save_state',
    # Controller
    'GameController',
    'GameView',
    'AddPlayer',
    'RemovePlayer',
    'StartGame',
    'NewGame',
    'EnterScore',
    'SetEditing',
    # Output
    'render_scoresheet',
    'export_scoresheet',
]
