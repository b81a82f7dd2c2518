"""Request bodies for the probe routes."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from court.direction import Direction
from court.entities import GameObject
from court.state import EntityState


class EntityBody(BaseModel):
    x: int
    y: int
    vx: int = 0
    vy: int = 0
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    def build(self):
        """Create a GameObject bounded by the current arena."""
        return GameObject.from_state(EntityState(self.x, self.y, self.vx, self.vy, self.width, self.height))


class MoveRequest(BaseModel):
    entity: EntityBody
    ticks: int = Field(default=1, ge=0, le=10_000)


class TurnRequest(BaseModel):
    entity: EntityBody
    direction: Optional[str] = None

    @field_validator("direction")
    @classmethod
    def known_direction(cls, value):
        Direction.parse(value)
        return value


class WallRequest(BaseModel):
    entity: EntityBody


class CollisionRequest(BaseModel):
    entity: EntityBody
    other: EntityBody
