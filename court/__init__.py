from court.arena import Arena, configure_arena, get_arena, reset_arena
from court.direction import Direction
from court.entities import GameObject, TURN_SPEED
from court.state import EntityState

__all__ = [
    "Arena",
    "configure_arena",
    "get_arena",
    "reset_arena",
    "Direction",
    "GameObject",
    "TURN_SPEED",
    "EntityState",
]
