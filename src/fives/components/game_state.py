"""Game state resource describing whether a game has been dealt."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """A board starts empty and becomes playable after the first new game."""
    UNINITIALIZED = auto()
    IN_PLAY = auto()


@dataclass
class GameState:
    """Singleton component storing the current game mode and move count."""
    mode: GameMode = GameMode.UNINITIALIZED
    moves: int = 0
