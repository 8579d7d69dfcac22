from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that nobody else holds on to.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS_RAW = "key_press_raw"          # payload: symbol=int, modifiers=int
EVENT_KEY_RELEASE_RAW = "key_release_raw"      # payload: symbol=int, modifiers=int
EVENT_INPUT = "input"                          # payload: event=InputEvent


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"    # payload: None
EVENT_GAME_STARTED = "game_started"            # payload: positions=list[(r,c)], values=list[int]


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_SHIFTED = "board_shifted"          # payload: direction=Direction, merges=int
EVENT_TILE_SPAWNED = "tile_spawned"            # payload: row=int, col=int, value=int
EVENT_SCORE_CHANGED = "score_changed"          # payload: score=int, previous=int
