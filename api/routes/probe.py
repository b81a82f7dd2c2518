"""Stateless probe routes over the game object queries."""

from fastapi import APIRouter

from api.models import CollisionRequest, MoveRequest, TurnRequest, WallRequest
from court.direction import Direction

router = APIRouter(prefix="/api/v1/probe", tags=["probe"])


def _name(direction):
    return direction.name if direction else None


@router.post("/move")
async def move(body: MoveRequest):
    """Advance an entity by ``ticks`` moves, clipping after each one."""
    obj = body.entity.build()
    for _ in range(body.ticks):
        obj.move()
    return {"entity": obj.to_state().to_dict()}


@router.post("/turn")
async def turn(body: TurnRequest):
    """Apply a user turn; a null direction leaves the entity unchanged."""
    obj = body.entity.build()
    obj.turn(Direction.parse(body.direction))
    return {"entity": obj.to_state().to_dict()}


@router.post("/hit-wall")
async def hit_wall(body: WallRequest):
    obj = body.entity.build()
    return {"direction": _name(obj.hit_wall())}


@router.post("/collision")
async def collision(body: CollisionRequest):
    """Current overlap, next-tick overlap and the side ``other`` is hit on."""
    obj = body.entity.build()
    other = body.other.build()
    return {
        "intersects": obj.intersects(other),
        "will_intersect": obj.will_intersect(other),
        "direction": _name(obj.hit_obj(other)),
    }
