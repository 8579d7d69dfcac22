from esper import World

from fives.components.board import Board
from fives.components.game_state import GameMode
from fives.events.bus import EventBus
from fives.rendering.board_renderer import BoardRenderer
from fives.world import get_game_state


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._board_renderer = BoardRenderer()

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self.draw(arcade, headless=headless)

    def draw(self, arcade, headless: bool = False):
        board = self._board()
        if board is None:
            return
        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.UNINITIALIZED:
            # Nothing dealt yet; keep the caches empty.
            self._board_renderer.last_layout = {}
            self._board_renderer.last_score = None
            return
        self._board_renderer.render(arcade, board, self.window.height, headless=headless)

    def get_tile_at_cell(self, col: int, row: int):
        return self._board_renderer.last_layout.get((col, row))

    @property
    def score_label(self):
        return self._board_renderer.last_score

    def _board(self) -> Board | None:
        for _, board in self.world.get_component(Board):
            return board
        return None
