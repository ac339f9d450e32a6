"""Data models for the score tracker."""

from dataclasses import dataclass, field

from .constants import DEFAULT_TARGET_SCORE


@dataclass
class Player:
    """
    Roster entry.

    ``id`` is the roster length when the player was added. After a removal a
    later player can receive an id already seen, so ids are labels only and
    every lookup goes by roster position.
    """
    id: int
    name: str


@dataclass
class ScoreCell:
    """One player's score for one round."""
    value: int | None = None
    editing: bool = False

    @property
    def filled(self) -> bool:
        return self.value is not None


@dataclass
class Round:
    """One cell per player, width fixed when the round is appended."""
    cells: list[ScoreCell] = field(default_factory=list)

    @classmethod
    def empty(cls, width: int) -> 'Round':
        return cls(cells=[ScoreCell() for _ in range(width)])

    def __len__(self) -> int:
        return len(self.cells)


@dataclass
class GameState:
    """Full game: roster, score grid (rounds x players), and lifecycle flag."""
    players: list[Player] = field(default_factory=list)
    rounds: list[Round] = field(default_factory=list)
    started: bool = False
    target_score: int = DEFAULT_TARGET_SCORE

    def cell(self, round_index: int, player_index: int) -> ScoreCell:
        return self.rounds[round_index].cells[player_index]

    def has_cell(self, round_index: int, player_index: int) -> bool:
        if not 0 <= round_index < len(self.rounds):
            return False
        return 0 <= player_index < len(self.rounds[round_index])

    def iter_cells(self):
        """Yield (round_index, player_index, cell) in round-major order."""
        for r, rnd in enumerate(self.rounds):
            for p, cell in enumerate(rnd.cells):
                yield r, p, cell
