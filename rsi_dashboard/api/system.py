"""System API — health check."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from rsi_dashboard.schemas.dashboard import HealthRead

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthRead)
def health_check(request: Request):
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return HealthRead(
        status="healthy",
        uptime=time.monotonic() - started_at,
        last_update=datetime.now(timezone.utc),
    )
