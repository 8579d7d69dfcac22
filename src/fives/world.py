import random

from esper import World
from fives.events.bus import EventBus
from fives.components.game_state import GameState, GameMode


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.UNINITIALIZED,
    *,
    rng: random.Random | None = None,
) -> World:
    world = World()
    # Systems draw every random number from this generator; tests pass a seeded one.
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    return world


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None
