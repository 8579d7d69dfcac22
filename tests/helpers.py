from __future__ import annotations

import random
from typing import Sequence

from esper import World

from fives.components.board import Board
from fives.events.bus import EventBus
from fives.systems.board import BoardSystem
from fives.world import create_world


class ScriptedRandom:
    """Stand-in for random.Random that replays a fixed list of draws.

    ``randrange`` returns the next scripted number; ``choice`` uses it as an
    index into the sequence it is given.
    """

    def __init__(self, draws: Sequence[int]) -> None:
        self._draws = list(draws)

    def _next(self) -> int:
        if not self._draws:
            raise AssertionError("ScriptedRandom ran out of draws")
        return self._draws.pop(0)

    def randrange(self, stop: int) -> int:
        value = self._next()
        assert 0 <= value < stop, f"scripted draw {value} outside range({stop})"
        return value

    def choice(self, seq):
        return seq[self.randrange(len(seq))]

    @property
    def remaining(self) -> int:
        return len(self._draws)


def set_cells(board: Board, rows: Sequence[Sequence[int]]) -> Board:
    """Overwrite the grid row by row and recompute nothing."""
    assert len(rows) == board.size
    board.cells = [list(row) for row in rows]
    return board


def build_board_system(
    rng: random.Random | ScriptedRandom | None = None,
) -> tuple[EventBus, World, BoardSystem]:
    bus = EventBus()
    world = create_world(bus, rng=rng if isinstance(rng, random.Random) else None)
    system = BoardSystem(world, bus, rng=rng)
    return bus, world, system
