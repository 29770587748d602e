import time

from fastapi import APIRouter

from config import settings
from services import country_service
from services.language_service import language_state

router = APIRouter(tags=["health"])

_started_at = time.monotonic()


@router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "uptime_seconds": round(time.monotonic() - _started_at),
        "version": "0.1.0",
        "recommender": settings.recommender_backend,
        "language": language_state.language.value,
        "countries": len(country_service.get_all()),
    }
