from __future__ import annotations

from typing import Any, Dict, Tuple

from fives.components.board import Board
from fives.constants import (
    BOARD_BACKGROUND,
    BOARD_EDGE_COLOR,
    BOARD_EDGE_WIDTH,
    BOARD_LENGTH,
    GRID_LINE_COLOR,
    GRID_LINE_WIDTH,
    SCORE_FONT_SIZE,
    SCORE_TEXT_COLOR,
    TILE_FONT_SIZE,
    TILE_TEXT_COLOR,
)
from fives.rendering.tile_colors import tile_color
from fives.ui.layout import cell_center, cell_rect, compute_board_geometry, score_position

GridPos = Tuple[int, int]  # (col, row)


class BoardRenderer:
    """Draws the board background, tiles, values, grid, edge and score."""

    def __init__(self) -> None:
        self.last_layout: Dict[GridPos, Dict[str, Any]] = {}
        self.last_score: Tuple[str, float, float] | None = None

    def render(self, arcade, board: Board, window_height: int, headless: bool) -> None:
        cell_size, left, top = compute_board_geometry(window_height, board.size)
        right = left + BOARD_LENGTH
        bottom = top - BOARD_LENGTH

        self.last_layout = {}
        for row in range(board.size):
            for col in range(board.size):
                text = board.text_at(col, row)
                if text is None:
                    continue
                self.last_layout[(col, row)] = {
                    "rect": cell_rect(col, row, window_height, board.size),
                    "center": cell_center(col, row, window_height, board.size),
                    "text": text,
                    "color": tile_color(board.value_at(col, row)),
                }
        score_x, score_y = score_position(window_height)
        self.last_score = (board.score_text(), score_x, score_y)
        if headless:
            return

        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, BOARD_BACKGROUND)
        for entry in self.last_layout.values():
            cell_left, cell_right, cell_bottom, cell_top = entry["rect"]
            arcade.draw_lrbt_rectangle_filled(cell_left, cell_right, cell_bottom, cell_top, entry["color"])
        for entry in self.last_layout.values():
            x, y = entry["center"]
            arcade.draw_text(
                entry["text"], x, y, TILE_TEXT_COLOR, TILE_FONT_SIZE,
                anchor_x="center", anchor_y="center",
            )
        arcade.draw_text(self.last_score[0], score_x, score_y, SCORE_TEXT_COLOR, SCORE_FONT_SIZE)

        # Left and top edges plus inner lines; the board edge closes the right and bottom.
        for i in range(board.size):
            x = left + i * cell_size
            y = top - i * cell_size
            arcade.draw_line(x, top, x, bottom, GRID_LINE_COLOR, GRID_LINE_WIDTH)
            arcade.draw_line(left, y, right, y, GRID_LINE_COLOR, GRID_LINE_WIDTH)
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, BOARD_EDGE_COLOR, BOARD_EDGE_WIDTH)
