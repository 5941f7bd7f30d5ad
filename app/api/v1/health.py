"""
Health check and monitoring endpoints.
"""

import time
from datetime import datetime

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from app.config import get_settings
from app.core.cache import get_cache_service
from app.schemas.common import HealthResponse, VocabularyStatus
from app.services.medical_data import (
    BRAND_TO_GENERIC,
    COMMON_CONDITIONS,
    COMMON_MEDICINES,
    CONDITION_SYNONYMS,
)

router = APIRouter()

# Track startup time
_startup_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Check service health and vocabulary status.

    No authentication required for health checks.
    """
    settings = get_settings()
    cache = await get_cache_service()

    return HealthResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        status="healthy",
        timestamp=datetime.utcnow(),
        vocabulary=VocabularyStatus(
            conditions=len(COMMON_CONDITIONS),
            synonym_entries=len(CONDITION_SYNONYMS),
            brand_aliases=len(BRAND_TO_GENERIC),
            medicine_suggestions=len(COMMON_MEDICINES)
        ),
        redis=cache.is_connected,
        uptime_seconds=time.time() - _startup_time
    )


@router.get("/metrics")
async def prometheus_metrics():
    """
    Expose Prometheus metrics.

    No authentication for metrics endpoint.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
