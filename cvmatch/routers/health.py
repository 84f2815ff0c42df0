"""
Health-check router.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from cvmatch.config import get_settings
from cvmatch.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    settings = get_settings()
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc),
    )
