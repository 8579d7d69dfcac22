from dataclasses import dataclass, field
from typing import List, Optional

from fives.constants import GRID_SIZE


def empty_grid(size: int = GRID_SIZE) -> List[List[int]]:
    return [[0] * size for _ in range(size)]


@dataclass(slots=True)
class Board:
    """Grid of tile values plus the score derived from them.

    ``cells`` is row-major (``cells[row][col]``) and 0 marks an empty cell.
    Accessors take ``(col, row)`` so renderers can pass x/y grid coordinates
    straight through. ``score`` is owned by the board systems and is always
    recomputed from the grid rather than adjusted. The grid is always
    GRID_SIZE x GRID_SIZE.
    """
    cells: Optional[List[List[int]]] = None
    score: int = 0
    size: int = field(default=GRID_SIZE, init=False)

    def __post_init__(self) -> None:
        if self.cells is None:
            self.cells = empty_grid(self.size)
        if len(self.cells) != self.size or any(len(row) != self.size for row in self.cells):
            raise ValueError(f"Board cells must be {self.size}x{self.size}")

    def _check(self, col: int, row: int) -> None:
        if not (0 <= col < self.size and 0 <= row < self.size):
            raise IndexError(f"cell ({col}, {row}) outside {self.size}x{self.size} board")

    def value_at(self, col: int, row: int) -> int:
        self._check(col, row)
        return self.cells[row][col]

    def text_at(self, col: int, row: int) -> str | None:
        value = self.value_at(col, row)
        if value == 0:
            return None
        return str(value)

    def set_value(self, col: int, row: int, value: int) -> None:
        self._check(col, row)
        self.cells[row][col] = value

    def score_text(self) -> str:
        return str(self.score)

    def clear(self) -> None:
        self.cells = empty_grid(self.size)
        self.score = 0

    def values(self) -> List[int]:
        return [value for row in self.cells for value in row]
