import math

from court.arena import get_arena
from court.direction import Direction
from court.state import EntityState
from internal.logging import get_logger

# Horizontal speed applied by a RIGHT turn.
TURN_SPEED = 5


class GameObject:
    """An axis-aligned box that moves inside the court.

    Coordinates are those of the upper-left corner and grow rightward and
    downward. After every clip() the position satisfies
    0 <= pos_x <= max_x and 0 <= pos_y <= max_y. Construction does not clip,
    so an object may start out of bounds until its first move().
    """

    def __init__(self, pos_x, pos_y, v_x, v_y, width, height):
        self.pos_x = pos_x
        self.pos_y = pos_y
        self.v_x = v_x
        self.v_y = v_y
        self.width = width
        self.height = height

        # Bounds apply to the upper-left corner, so the size is taken off.
        arena = get_arena()
        self.max_x = arena.width - width
        self.max_y = arena.height - height

    def __repr__(self):
        return (f"{type(self).__name__}(pos=({self.pos_x}, {self.pos_y}), "
                f"v=({self.v_x}, {self.v_y}), size={self.width}x{self.height})")

    def move(self):
        """Advance by one tick of velocity, then clip into bounds."""
        self.pos_x += self.v_x
        self.pos_y += self.v_y
        self.clip()

    def clip(self):
        if self.pos_x < 0:
            self.pos_x = 0
        elif self.pos_x > self.max_x:
            self.pos_x = self.max_x

        if self.pos_y < 0:
            self.pos_y = 0
        elif self.pos_y > self.max_y:
            self.pos_y = self.max_y

    def intersects(self, other):
        """Whether the bounding boxes overlap now. Touching edges count."""
        return _boxes_overlap(self.pos_x, self.pos_y, self.width, self.height,
                              other.pos_x, other.pos_y, other.width, other.height)

    def will_intersect(self, other):
        """Whether the bounding boxes will overlap after both objects move once."""
        return _boxes_overlap(self.pos_x + self.v_x, self.pos_y + self.v_y,
                              self.width, self.height,
                              other.pos_x + other.v_x, other.pos_y + other.v_y,
                              other.width, other.height)

    def turn(self, direction):
        """Update velocity for a user turn. None leaves the object untouched.

        DOWN keeps v_y as is and RIGHT sets a fixed speed, while UP and LEFT
        reverse the current component. Callers rely on this exact mapping.
        """
        if direction is None:
            return
        if direction is Direction.UP:
            self.v_x = 0
            self.v_y = -self.v_y
        elif direction is Direction.DOWN:
            self.v_x = 0
        elif direction is Direction.LEFT:
            self.v_x = -self.v_x
            self.v_y = 0
        elif direction is Direction.RIGHT:
            self.v_x = TURN_SPEED
            self.v_y = 0

    def hit_wall(self):
        """Direction of the wall crossed on the next tick, or None if clear.

        The x axis is checked first, so a corner impact reports LEFT or RIGHT.
        """
        next_x = self.pos_x + self.v_x
        next_y = self.pos_y + self.v_y
        if next_x < 0:
            return Direction.LEFT
        elif next_x > self.max_x:
            return Direction.RIGHT
        if next_y < 0:
            return Direction.UP
        elif next_y > self.max_y:
            return Direction.DOWN
        return None

    def hit_obj(self, other):
        """Direction of ``other`` if it is hit on the next tick, or None.

        The center-to-center vector is sorted into sectors bounded by this
        object's own diagonal: within diag_theta of the +x axis is RIGHT,
        within diag_theta of the -x axis is LEFT, anything between is UP or
        DOWN depending on the sign of dy (y grows downward).
        """
        if not self.will_intersect(other):
            return None

        dx = (other.pos_x + _half(other.width)) - (self.pos_x + _half(self.width))
        dy = (other.pos_y + _half(other.height)) - (self.pos_y + _half(self.height))
        if dx == 0 and dy == 0:
            # No angle exists for a zero vector; it falls through to LEFT.
            get_logger().debug("concentric hit", pos_x=self.pos_x, pos_y=self.pos_y)
            return Direction.LEFT

        theta = math.acos(dx / math.sqrt(dx * dx + dy * dy))
        diag_theta = math.atan2(_half(self.height), _half(self.width))

        if theta <= diag_theta:
            return Direction.RIGHT
        elif theta <= math.pi - diag_theta:
            return Direction.DOWN if dy > 0 else Direction.UP
        return Direction.LEFT

    def draw(self, surface):
        """Render onto ``surface``. Subclasses override; the base draws nothing."""

    def to_state(self):
        """Create an immutable snapshot of position, velocity and size."""
        return EntityState(self.pos_x, self.pos_y, self.v_x, self.v_y, self.width, self.height)

    @classmethod
    def from_state(cls, state):
        return cls(state.x, state.y, state.vx, state.vy, state.width, state.height)


def _half(n):
    """Integer half of n, truncated toward zero."""
    return -(-n // 2) if n < 0 else n // 2


def _boxes_overlap(x1, y1, w1, h1, x2, y2, w2, h2):
    return (x1 + w1 >= x2
            and y1 + h1 >= y2
            and x2 + w2 >= x1
            and y2 + h2 >= y1)
