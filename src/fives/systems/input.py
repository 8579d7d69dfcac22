from fives.constants import NEW_GAME_KEYS
from fives.events.bus import (
    EventBus,
    EVENT_INPUT,
    EVENT_KEY_PRESS_RAW,
    EVENT_KEY_RELEASE_RAW,
    EVENT_NEW_GAME_REQUEST,
)
from fives.events.input import InputEvent


class InputSystem:
    """Turns raw window key callbacks into InputEvents for the board core."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS_RAW, self.on_key_press)
        self.event_bus.subscribe(EVENT_KEY_RELEASE_RAW, self.on_key_release)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        modifiers = kwargs.get('modifiers') or 0
        if symbol in NEW_GAME_KEYS:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
        self.event_bus.emit(EVENT_INPUT, event=InputEvent.press(symbol, modifiers))

    def on_key_release(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        modifiers = kwargs.get('modifiers') or 0
        self.event_bus.emit(EVENT_INPUT, event=InputEvent.release(symbol, modifiers))
