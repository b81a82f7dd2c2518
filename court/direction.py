"""Cardinal directions used for input turns and impact classification.

"No direction" is never a member: it is represented by ``None`` wherever a
``Optional[Direction]`` is accepted or returned.
"""

from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self):
        """The direction pointing the other way."""
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name):
        """Parse a member name case-insensitively; None or "" means no direction."""
        if name is None or name == "":
            return None
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown direction: {name!r}") from None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
