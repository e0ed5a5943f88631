"""
Health endpoint used by container liveness probes.

The bank has no external dependencies to check, so a process that can
answer the request is healthy.
"""

from fastapi import APIRouter

from bank_api.app.schemas.health import HealthStatus

router = APIRouter()


@router.get("", response_model=HealthStatus)
async def check() -> HealthStatus:
    return HealthStatus(status="ok")
