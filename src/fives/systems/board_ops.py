from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from fives.components.board import Board
from fives.components.direction import Direction
from fives.constants import (
    INITIAL_TILE_COUNT,
    INITIAL_TILE_VALUES,
    SCORE_MAX_MULTIPLIER,
    SPAWN_EXPONENTS,
    TILE_BASE,
)

Position = Tuple[int, int]  # (row, col)


@dataclass(slots=True)
class ShiftResult:
    direction: Direction
    merges: int
    spawned: Position | None = None
    spawn_value: int | None = None

    @property
    def moved(self) -> bool:
        return self.merges > 0


def line_positions(direction: Direction, line: int, size: int) -> List[Position]:
    """Positions of one line, starting at the edge the tiles travel toward."""
    order = range(size) if direction.step < 0 else range(size - 1, -1, -1)
    if direction.axis == 0:
        return [(index, line) for index in order]
    return [(line, index) for index in order]


def merge(board: Board, source: Position, destination: Position) -> bool:
    """Fold ``source`` into ``destination`` if it is empty or holds the same value."""
    src_row, src_col = source
    dst_row, dst_col = destination
    src_val = board.cells[src_row][src_col]
    dst_val = board.cells[dst_row][dst_col]
    if src_val == 0 or (dst_val != 0 and dst_val != src_val):
        return False
    board.cells[dst_row][dst_col] = src_val + dst_val
    board.cells[src_row][src_col] = 0
    return True


def sweep(board: Board, direction: Direction) -> int:
    """Single pass over every adjacent pair, nearest the target edge first.

    Each pair is tried once, so a tile moves at most one cell per call and
    longer chains are not collapsed. Returns the number of successful merges.
    """
    merges = 0
    for line in range(board.size):
        positions = line_positions(direction, line, board.size)
        for destination, source in zip(positions, positions[1:]):
            if merge(board, source, destination):
                merges += 1
    return merges


def trailing_edge_vacancies(board: Board, direction: Direction) -> List[Position]:
    vacancies: List[Position] = []
    for line in range(board.size):
        row, col = line_positions(direction, line, board.size)[-1]
        if board.cells[row][col] == 0:
            vacancies.append((row, col))
    return vacancies


def spawn_value(rng: random.Random) -> int:
    # Uniform over the exponent: 5, 10 and 20 are equally likely.
    return TILE_BASE * 2 ** rng.randrange(SPAWN_EXPONENTS)


def spawn_on_trailing_edge(board: Board, direction: Direction, rng: random.Random) -> tuple[Position, int] | None:
    value = spawn_value(rng)
    vacancies = trailing_edge_vacancies(board, direction)
    if not vacancies:
        return None
    row, col = rng.choice(vacancies)
    board.cells[row][col] = value
    return (row, col), value


def shift(board: Board, direction: Direction, rng: random.Random) -> ShiftResult:
    """Sweep the board toward ``direction`` and spawn a tile if anything moved."""
    result = ShiftResult(direction=direction, merges=sweep(board, direction))
    if result.moved:
        spawned = spawn_on_trailing_edge(board, direction, rng)
        if spawned is not None:
            result.spawned, result.spawn_value = spawned
    return result


def deal_new_game(board: Board, rng: random.Random, count: int = INITIAL_TILE_COUNT) -> List[Position]:
    """Clear the board and drop ``count`` tiles on distinct random cells."""
    if count > board.size * board.size:
        raise ValueError(f"cannot place {count} tiles on a {board.size}x{board.size} board")
    board.clear()
    placed: List[Position] = []
    while len(placed) < count:
        col = rng.randrange(board.size)
        row = rng.randrange(board.size)
        value = rng.choice(INITIAL_TILE_VALUES)
        # Occupied cell: discard the draw and try again.
        if board.cells[row][col] == 0:
            board.cells[row][col] = value
            placed.append((row, col))
    return placed


def compute_score(board: Board) -> int:
    values = board.values()
    return sum(values) + SCORE_MAX_MULTIPLIER * max(values, default=0)


def update_score(board: Board) -> int:
    board.score = compute_score(board)
    return board.score
