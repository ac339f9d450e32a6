"""Pydantic schemas for the persisted game."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_TARGET_SCORE, SCORE_MAX, SCORE_MIN
from .models import GameState, Player, Round, ScoreCell


class PlayerRecord(BaseModel):
    """Player in the saved roster."""

    model_config = ConfigDict(extra='forbid')

    id: int = Field(..., ge=0)
    name: str = Field(..., min_length=1)


class ScoreRecord(BaseModel):
    """One saved score cell. ``editing`` is optional on input."""

    model_config = ConfigDict(extra='forbid')

    value: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)
    editing: bool = False


class GameStateFile(BaseModel):
    """
    Complete saved game.

    Accepts the older field names (``first_to``, ``is_game_started``) and the
    older round shape ``{"scores": [10, null]}`` alongside the current one.
    Always written with the current names.
    """

    model_config = ConfigDict(extra='ignore')

    players: list[PlayerRecord] = Field(default_factory=list)
    rounds: list[list[ScoreRecord]] = Field(default_factory=list)
    started: bool = Field(
        False,
        validation_alias=AliasChoices('started', 'is_game_started'),
        serialization_alias='started',
    )
    target_score: int = Field(
        DEFAULT_TARGET_SCORE,
        ge=1,
        validation_alias=AliasChoices('targetScore', 'first_to', 'target_score'),
        serialization_alias='targetScore',
    )

    @field_validator('rounds', mode='before')
    @classmethod
    def normalize_rounds(cls, v: Any) -> Any:
        """Unwrap ``{"scores": [...]}`` rounds and bare values into cell records."""
        if not isinstance(v, list):
            return v
        rounds = []
        for rnd in v:
            if isinstance(rnd, dict) and 'scores' in rnd:
                rnd = rnd['scores']
            if not isinstance(rnd, list):
                rounds.append(rnd)
                continue
            rounds.append([
                c if isinstance(c, (dict, ScoreRecord)) else {'value': c} for c in rnd
            ])
        return rounds

    @classmethod
    def from_state(cls, state: GameState) -> 'GameStateFile':
        return cls(
            players=[PlayerRecord(id=p.id, name=p.name) for p in state.players],
            rounds=[
                [ScoreRecord(value=c.value, editing=c.editing) for c in rnd.cells]
                for rnd in state.rounds
            ],
            started=state.started,
            target_score=state.target_score,
        )

    def to_state(self) -> GameState:
        return GameState(
            players=[Player(id=p.id, name=p.name) for p in self.players],
            rounds=[
                Round(cells=[ScoreCell(value=c.value, editing=c.editing) for c in rnd])
                for rnd in self.rounds
            ],
            started=self.started,
            target_score=self.target_score,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
