"""Health and observability routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from court.arena import get_arena
from internal.health import Status
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])

# Set by app.py
_health_checker = None


def init(health_checker):
    global _health_checker
    _health_checker = health_checker


@router.get("/health")
async def health():
    """Component report; 503 when a critical check fails."""
    report = await _health_checker.check()
    failed = report["status"] == Status.FAIL.value
    return JSONResponse(content=report, status_code=503 if failed else 200)


@router.get("/heartbeat")
async def heartbeat():
    """Uptime and the court size probes run against."""
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
        "uptime_s": round(_health_checker.uptime, 1),
        "arena": get_arena().to_dict(),
    }
