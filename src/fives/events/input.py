"""Window-agnostic input events handed to the board core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class InputKind(Enum):
    PRESS = auto()
    RELEASE = auto()
    OTHER = auto()


@dataclass(frozen=True, slots=True)
class InputEvent:
    kind: InputKind
    symbol: int | None = None
    modifiers: int = 0

    @classmethod
    def press(cls, symbol: int, modifiers: int = 0) -> InputEvent:
        return cls(InputKind.PRESS, symbol, modifiers)

    @classmethod
    def release(cls, symbol: int, modifiers: int = 0) -> InputEvent:
        return cls(InputKind.RELEASE, symbol, modifiers)

    def press_args(self) -> int | None:
        """Key symbol when this is a key press, otherwise None."""
        if self.kind is InputKind.PRESS:
            return self.symbol
        return None
