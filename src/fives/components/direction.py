from enum import Enum


class Direction(Enum):
    """Shift directions as (axis, step).

    ``axis`` 0 means tiles travel along columns (lines are columns); 1 means
    they travel along rows. ``step`` is -1 when tiles move toward index 0 and
    +1 when they move toward the last index.
    """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (1, -1)
    RIGHT = (1, 1)

    @property
    def axis(self) -> int:
        return self.value[0]

    @property
    def step(self) -> int:
        return self.value[1]
