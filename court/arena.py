"""Arena defines the court boundaries shared by every game object."""

import threading

from core.errors import ConfigError
from internal.logging import get_logger

COURT_WIDTH = 300
COURT_HEIGHT = 300

_arena = None
_arena_lock = threading.Lock()


def check_size(width, height):
    """Raise ConfigError unless both sides are positive ints (bools excluded)."""
    for side in (width, height):
        if type(side) is not int or side <= 0:
            raise ConfigError("arena size must be a positive integer", key="arena",
                              context={"width": width, "height": height})


class Arena:
    """Fixed-size court with width and height bounds."""
    __slots__ = ("width", "height")

    def __init__(self, width=COURT_WIDTH, height=COURT_HEIGHT):
        check_size(width, height)
        self.width = width
        self.height = height

    def to_dict(self):
        return {"width": self.width, "height": self.height}


def configure_arena(width=COURT_WIDTH, height=COURT_HEIGHT):
    """Install the process-wide arena. Existing objects keep their bounds."""
    global _arena
    arena = Arena(width, height)
    with _arena_lock:
        _arena = arena
    get_logger().info("arena configured", width=width, height=height)
    return arena


def get_arena():
    global _arena
    if _arena is None:
        with _arena_lock:
            if _arena is None:
                _arena = Arena()
    return _arena


def reset_arena():
    """Drop any configured arena so the next lookup uses the defaults."""
    global _arena
    with _arena_lock:
        _arena = None
