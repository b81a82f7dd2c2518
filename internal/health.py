"""Component health for the probe service."""

import asyncio
import time
from enum import Enum
from utils.timestamp import format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg", "critical")

    def __init__(self, name, status, msg="", critical=True):
        self.name, self.status, self.msg, self.critical = name, status, msg, critical

    def to_dict(self):
        return {"name": self.name, "status": self.status.value, "msg": self.msg}


def overall_status(results):
    """FAIL if a critical check failed, DEGRADED if anything else is off, else OK."""
    if any(r.status == Status.FAIL and r.critical for r in results):
        return Status.FAIL
    if any(r.status != Status.OK for r in results):
        return Status.DEGRADED
    return Status.OK


class HealthChecker:
    """Runs registered async checks on demand; a raising check counts as FAIL."""

    def __init__(self):
        self._checks = []
        self._start_time = time.time()

    @property
    def uptime(self):
        return time.time() - self._start_time

    def register(self, name, check_fn, critical=True):
        self._checks.append((name, check_fn, critical))

    async def check(self):
        results = []
        for name, check_fn, critical in self._checks:
            try:
                result = await check_fn()
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            result.critical = critical
            results.append(result)
        return {"status": overall_status(results).value,
                "timestamp": format_timestamp(),
                "uptime": round(self.uptime, 1),
                "checks": [result.to_dict() for result in results]}

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

def create_arena_check(get_arena, expected=None):
    """Report the active arena; degraded if it differs from the configured size."""
    async def check():
        arena = get_arena()
        size = f"{arena.width}x{arena.height}"
        if expected is not None and (arena.width, arena.height) != (expected.width, expected.height):
            return CheckResult("arena", Status.DEGRADED, f"{size}!={expected.width}x{expected.height}")
        return CheckResult("arena", Status.OK, size)
    return check
