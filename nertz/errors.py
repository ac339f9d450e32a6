"""
Exception hierarchy for the score tracker.

Index and precondition errors are raised before any state is written.
Persistence errors are raised after the in-memory mutation has committed.
"""


class NertzError(Exception):
    """Base class for all score tracker errors."""
    pass


# ============ Validation ============

class ValidationError(NertzError):
    """A command argument was rejected."""
    pass


class RosterIndexError(ValidationError, IndexError):
    """Player position is outside the roster."""
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f'Player index {index} out of range for roster of {size}')


class ScoreIndexError(ValidationError, IndexError):
    """Score cell coordinates are outside the score grid."""
    def __init__(self, round_index: int, player_index: int):
        self.round_index = round_index
        self.player_index = player_index
        super().__init__(f'No score cell at round {round_index}, player {player_index}')


class ScoreValueError(ValidationError):
    """Score is not an integer in the storable range."""
    pass


# ============ Preconditions ============

class PreconditionError(NertzError):
    """Command is not allowed in the current game state."""
    pass


class StateError(PreconditionError):
    """Command requires the game to be started (or not started)."""
    pass


# ============ Persistence ============

class PersistenceError(NertzError):
    """Base class for storage failures."""
    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f'{message} (key {key!r})')


class PersistenceLoadError(PersistenceError):
    """Stored game is missing or unreadable."""
    pass


class PersistenceSaveError(PersistenceError):
    """Game could not be written to the store."""
    pass
