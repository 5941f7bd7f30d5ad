"""
Analytics dashboard endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.requests import Request

from app.core.auth import verify_api_key
from app.core.logging import get_logger
from app.core.rate_limit import get_rate_limit_string, limiter
from app.dependencies import get_analytics_service
from app.schemas.analytics import AnalyticsReport, CacheInvalidationResponse
from app.services.analytics_service import AnalyticsService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/analytics",
    tags=["analytics"],
    dependencies=[Depends(verify_api_key)]
)


@router.get(
    "/dashboard",
    response_model=AnalyticsReport,
    summary="Clinic Analytics Dashboard",
    description="""
    Aggregated clinic statistics for the analytics dashboard.

    Features:
    - Top conditions detected in recent visit notes (negation-aware)
    - Top medicines, brand names resolved and dosage variants grouped
    - Patient growth, record completion and daily averages
    - Gender, age band and appointment type breakdowns
    - Week-over-week patient registrations
    """
)
@limiter.limit(get_rate_limit_string())
async def get_dashboard(
    request: Request,
    service: AnalyticsService = Depends(get_analytics_service)
) -> AnalyticsReport:
    """
    Generate (or serve a cached) analytics report.

    Returns:
        The complete dashboard report.
    """
    try:
        return await service.get_dashboard()
    except Exception as e:
        logger.error(f"Analytics report generation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Clinic records are temporarily unavailable"
        )


@router.post(
    "/cache/clear",
    response_model=CacheInvalidationResponse,
    summary="Clear Cached Dashboard Reports"
)
async def clear_dashboard_cache(
    service: AnalyticsService = Depends(get_analytics_service)
) -> CacheInvalidationResponse:
    """Drop cached reports so the next dashboard request reads fresh records."""
    cleared = await service.invalidate_dashboard()
    logger.info("Dashboard cache cleared", extra={"cleared": cleared})
    return CacheInvalidationResponse(cleared=cleared)
