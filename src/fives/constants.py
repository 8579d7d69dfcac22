GRID_SIZE = 5

# New game: this many tiles, each drawn uniformly from INITIAL_TILE_VALUES.
INITIAL_TILE_COUNT = 4
INITIAL_TILE_VALUES = (5, 10)

# Spawned tile after a successful shift is TILE_BASE * 2**r with r uniform over range(SPAWN_EXPONENTS).
TILE_BASE = 5
SPAWN_EXPONENTS = 3

# Score = sum of tiles + SCORE_MAX_MULTIPLIER * largest tile.
SCORE_MAX_MULTIPLIER = 5

# Arcade (pyglet) key codes, kept literal so the board core never imports arcade.
KEY_UP = 65362       # arcade.key.UP
KEY_DOWN = 65364     # arcade.key.DOWN
KEY_LEFT = 65361     # arcade.key.LEFT
KEY_RIGHT = 65363    # arcade.key.RIGHT
KEY_ESCAPE = 65307   # arcade.key.ESCAPE
KEY_BACKSPACE = 65288  # arcade.key.BACKSPACE
KEY_N = 110          # arcade.key.N
NEW_GAME_KEYS = (KEY_N, KEY_BACKSPACE)

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 700
WINDOW_TITLE = "Fives"

# Board footprint, measured from the top-left corner of the window.
BOARD_OFFSET = 10
BOARD_LENGTH = 580
GRID_LINE_WIDTH = 4
BOARD_EDGE_WIDTH = 2

WINDOW_BACKGROUND = (255, 255, 255)
BOARD_BACKGROUND = (230, 230, 230)
GRID_LINE_COLOR = (26, 26, 26)
BOARD_EDGE_COLOR = (51, 51, 51)
TILE_TEXT_COLOR = (255, 255, 255)
SCORE_TEXT_COLOR = (0, 0, 0)

# Tile palette cycles every six doublings; each completed cycle darkens the color.
TILE_COLORS = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
)
TILE_DARKEN_FACTOR = 0.8

TILE_FONT_SIZE = 40
SCORE_FONT_SIZE = 50
# Score baseline sits BOARD_LENGTH + SCORE_BASELINE_GAP below the window top.
SCORE_BASELINE_GAP = 50
SCORE_LEFT = 20
