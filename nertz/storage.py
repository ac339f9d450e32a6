"""
Persistence gateway.

The whole game is stored as one JSON-compatible payload under a single key.
Stores only need ``get`` (raising KeyError for a missing key) and ``set``.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Protocol

from .constants import DEFAULT_TARGET_SCORE
from .cursor import find_focused, first_unfilled, set_editing
from .errors import PersistenceLoadError, PersistenceSaveError
from .models import GameState
from .rounds import append_round
from .schemas import GameStateFile
from .utils import load_json, load_json_safe, save_json
from .validators import validate_state

logger = logging.getLogger('nertz.storage')


class KeyValueStore(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """Dict-backed store. Payloads are deep-copied in and out."""

    def __init__(self, data: dict[str, Any] | None = None):
        self.data = dict(data or {})

    def get(self, key: str) -> Any:
        return copy.deepcopy(self.data[key])

    def set(self, key: str, value: Any) -> None:
        self.data[key] = copy.deepcopy(value)


class JsonFileStore:
    """
    Store backed by one JSON file holding a key -> payload mapping.

    Args:
        path: JSON file; created on first write
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def get(self, key: str) -> Any:
        if not self.path.exists():
            raise KeyError(key)
        data = load_json(self.path)
        if not isinstance(data, dict):
            raise ValueError(f'{self.path} does not hold a key-value mapping')
        return data[key]

    def set(self, key: str, value: Any) -> None:
        data = load_json_safe(self.path, default={})
        if not isinstance(data, dict):
            data = {}
        data[key] = value
        save_json(self.path, data)


def _restore_cursor(state: GameState) -> None:
    """Focus a cell on a started game saved without one."""
    if not state.started or find_focused(state) is not None:
        return
    focus = first_unfilled(state)
    if focus is None:
        focus = (append_round(state), 0)
    set_editing(state, *focus)


def load_state(store: KeyValueStore, key: str) -> GameState:
    """
    Load and validate a saved game.

    Raises:
        PersistenceLoadError: If the key is missing, the payload cannot be
            read or parsed, or the restored game is inconsistent
    """
    try:
        payload = store.get(key)
    except KeyError as e:
        raise PersistenceLoadError(key, 'No saved game') from e
    except Exception as e:
        raise PersistenceLoadError(key, f'Could not read saved game: {e}') from e

    try:
        record = GameStateFile.model_validate(payload)
    except ValueError as e:
        raise PersistenceLoadError(key, f'Malformed saved game: {e}') from e

    state = record.to_state()
    errors = validate_state(state)
    if errors:
        raise PersistenceLoadError(key, 'Inconsistent saved game: ' + '; '.join(errors))

    _restore_cursor(state)
    logger.debug(
        f'Loaded game {key!r}: {len(state.players)} players, {len(state.rounds)} rounds'
    )
    return state


def load_state_safe(
    store: KeyValueStore,
    key: str,
    target_score: int = DEFAULT_TARGET_SCORE,
) -> GameState:
    """Load a saved game, falling back to a fresh one on any load error."""
    try:
        return load_state(store, key)
    except PersistenceLoadError as e:
        logger.warning(f'{e}; starting a fresh game')
        return GameState(target_score=target_score)


def save_state(store: KeyValueStore, key: str, state: GameState) -> None:
    """
    Write the full game under key.

    Raises:
        PersistenceSaveError: If the game cannot be serialized or the store
            rejects the write
    """
    try:
        store.set(key, GameStateFile.from_state(state).to_payload())
    except Exception as e:
        logger.error(f'Failed to save game {key!r}: {e}')
        raise PersistenceSaveError(key, f'Could not save game: {e}') from e
    logger.debug(f'Saved game {key!r}')
