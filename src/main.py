"""Entry point for Fives, a 5x5 tile-merging puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color
from fives.world import create_world, get_game_state
from fives.constants import KEY_ESCAPE, WINDOW_BACKGROUND, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from fives.events.bus import EventBus, EVENT_KEY_PRESS_RAW, EVENT_KEY_RELEASE_RAW
from fives.systems.board import BoardSystem
from fives.systems.input import InputSystem
from fives.systems.render import RenderSystem

logger = logging.getLogger(__name__)


class FivesWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.input_system = InputSystem(self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.board_system.new_game()
        set_background_color(WINDOW_BACKGROUND)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == KEY_ESCAPE:
            self.close()
            return
        self.event_bus.emit(EVENT_KEY_PRESS_RAW, symbol=symbol, modifiers=modifiers)

    def on_key_release(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_RELEASE_RAW, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = FivesWindow()
    run()
    state = get_game_state(window.world)
    logger.info("Window closed with score %s after %d moves",
                window.board_system.board.score_text(), state.moves if state else 0)

if __name__ == "__main__":
    main()
