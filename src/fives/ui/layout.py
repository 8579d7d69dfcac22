from fives.constants import (
    BOARD_LENGTH,
    BOARD_OFFSET,
    GRID_SIZE,
    SCORE_BASELINE_GAP,
    SCORE_LEFT,
)

def compute_board_geometry(window_height: int, size: int = GRID_SIZE):
    """Return (cell_size, left, top) of the board in arcade coordinates.

    The board is anchored BOARD_OFFSET pixels from the window's top-left corner;
    arcade's y axis grows upward, so ``top`` is measured from the bottom.
    """
    cell_size = BOARD_LENGTH / size
    left = BOARD_OFFSET
    top = window_height - BOARD_OFFSET
    return cell_size, left, top


def cell_rect(col: int, row: int, window_height: int, size: int = GRID_SIZE):
    """(left, right, bottom, top) of a cell; row 0 is the top row."""
    cell_size, left, top = compute_board_geometry(window_height, size)
    cell_left = left + col * cell_size
    cell_top = top - row * cell_size
    return cell_left, cell_left + cell_size, cell_top - cell_size, cell_top


def cell_center(col: int, row: int, window_height: int, size: int = GRID_SIZE):
    cell_left, cell_right, cell_bottom, cell_top = cell_rect(col, row, window_height, size)
    return (cell_left + cell_right) / 2, (cell_bottom + cell_top) / 2


def score_position(window_height: int):
    """Baseline origin of the score text, a fixed distance from the window top."""
    return SCORE_LEFT, window_height - (BOARD_LENGTH + SCORE_BASELINE_GAP)
