import logging
import random

from esper import World
from fives.components.board import Board
from fives.components.direction import Direction
from fives.components.game_state import GameMode
from fives.constants import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP
from fives.events.bus import (
    EventBus,
    EVENT_BOARD_SHIFTED,
    EVENT_GAME_STARTED,
    EVENT_INPUT,
    EVENT_NEW_GAME_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_SPAWNED,
)
from fives.events.input import InputEvent
from fives.systems.board_ops import ShiftResult, deal_new_game, shift, update_score
from fives.world import get_game_state

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


def direction_for_event(event: InputEvent) -> Direction | None:
    symbol = event.press_args()
    if symbol is None:
        return None
    return KEY_DIRECTIONS.get(symbol)


class BoardSystem:
    def __init__(self, world: World, event_bus: EventBus, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self.rng = rng or getattr(world, "random", None) or random.Random()
        # Single board entity; starts empty until new_game() deals the first tiles.
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board())
        self.event_bus.subscribe(EVENT_INPUT, self.on_input)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def new_game(self) -> None:
        board = self.board
        previous = board.score
        positions = deal_new_game(board, self.rng)
        state = get_game_state(self.world)
        if state is not None:
            state.mode = GameMode.IN_PLAY
            state.moves = 0
        logger.debug("New game dealt at %s", positions)
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            positions=positions,
            values=[board.cells[row][col] for row, col in positions],
        )
        self._refresh_score(previous)

    def shift(self, direction: Direction) -> ShiftResult:
        board = self.board
        previous = board.score
        result = shift(board, direction, self.rng)
        if result.moved:
            state = get_game_state(self.world)
            moves = 0
            if state is not None:
                state.moves += 1
                moves = state.moves
            logger.debug("Move %d: shift %s merged %d pair(s), spawned %s=%s",
                         moves, direction.name, result.merges, result.spawned, result.spawn_value)
            self.event_bus.emit(EVENT_BOARD_SHIFTED, direction=direction, merges=result.merges)
            if result.spawned is not None:
                row, col = result.spawned
                self.event_bus.emit(EVENT_TILE_SPAWNED, row=row, col=col, value=result.spawn_value)
        else:
            logger.debug("Shift %s blocked", direction.name)
        self._refresh_score(previous)
        return result

    def shift_up(self) -> ShiftResult:
        return self.shift(Direction.UP)

    def shift_down(self) -> ShiftResult:
        return self.shift(Direction.DOWN)

    def shift_left(self) -> ShiftResult:
        return self.shift(Direction.LEFT)

    def shift_right(self) -> ShiftResult:
        return self.shift(Direction.RIGHT)

    def handle_event(self, event: InputEvent) -> None:
        """Run the shift bound to a directional key press; always recompute the score."""
        direction = direction_for_event(event)
        if direction is not None:
            self.shift(direction)
        self._refresh_score(self.board.score)

    def on_input(self, sender, **kwargs):
        event = kwargs.get('event')
        if event is None:
            return
        self.handle_event(event)

    def on_new_game_request(self, sender, **kwargs):
        self.new_game()

    def _refresh_score(self, previous: int) -> None:
        score = update_score(self.board)
        if score != previous:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=score, previous=previous)
